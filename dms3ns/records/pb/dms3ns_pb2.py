# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: dms3ns/records/pb/dms3ns.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x1e\x64ms3ns/records/pb/dms3ns.proto\x12\x11\x64ms3ns.records.pb\"\xab\x02\n\x0b\x44ms3NsEntry\x12\x12\n\x05value\x18\x01 \x01(\x0cH\x00\x88\x01\x01\x12\x16\n\tsignature\x18\x02 \x01(\x0cH\x01\x88\x01\x01\x12\x46\n\x0cvalidityType\x18\x03 \x01(\x0e\x32+.dms3ns.records.pb.Dms3NsEntry.ValidityTypeH\x02\x88\x01\x01\x12\x15\n\x08validity\x18\x04 \x01(\x0cH\x03\x88\x01\x01\x12\x15\n\x08sequence\x18\x05 \x01(\x04H\x04\x88\x01\x01\x12\x13\n\x06pubKey\x18\x07 \x01(\x0cH\x05\x88\x01\x01\"\x17\n\x0cValidityType\x12\x07\n\x03\x45OL\x10\x00\x42\x08\n\x06_valueB\x0c\n\n_signatureB\x0f\n\r_validityTypeB\x0b\n\t_validityB\x0b\n\t_sequenceB\t\n\x07_pubKeyb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'dms3ns.records.pb.dms3ns_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _DMS3NSENTRY._serialized_start=54
  _DMS3NSENTRY._serialized_end=353
  _DMS3NSENTRY_VALIDITYTYPE._serialized_start=252
  _DMS3NSENTRY_VALIDITYTYPE._serialized_end=275
# @@protoc_insertion_point(module_scope)
