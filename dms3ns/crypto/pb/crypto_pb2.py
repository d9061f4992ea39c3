# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: dms3ns/crypto/pb/crypto.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x1d\x64ms3ns/crypto/pb/crypto.proto\x12\x10\x64ms3ns.crypto.pb\"F\n\tPublicKey\x12+\n\x08key_type\x18\x01 \x02(\x0e\x32\x19.dms3ns.crypto.pb.KeyType\x12\x0c\n\x04\x64\x61ta\x18\x02 \x02(\x0c\"G\n\nPrivateKey\x12+\n\x08key_type\x18\x01 \x02(\x0e\x32\x19.dms3ns.crypto.pb.KeyType\x12\x0c\n\x04\x64\x61ta\x18\x02 \x02(\x0c*9\n\x07KeyType\x12\x07\n\x03RSA\x10\x00\x12\x0b\n\x07\x45\x64\x32\x35\x35\x31\x39\x10\x01\x12\r\n\tSecp256k1\x10\x02\x12\t\n\x05\x45\x43\x44SA\x10\x03')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'dms3ns.crypto.pb.crypto_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _KEYTYPE._serialized_start=196
  _KEYTYPE._serialized_end=253
  _PUBLICKEY._serialized_start=51
  _PUBLICKEY._serialized_end=121
  _PRIVATEKEY._serialized_start=123
  _PRIVATEKEY._serialized_end=194
# @@protoc_insertion_point(module_scope)
