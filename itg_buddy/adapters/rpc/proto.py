"""Protobuf messages for the itg_buddy.SimfileManagement service.

The message classes are built from a descriptor at import time instead of
from protoc output; proto/itg_buddy.proto is the matching source.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

PACKAGE = "itg_buddy"
SERVICE_NAME = f"{PACKAGE}.SimfileManagement"
ADD_SONG_METHOD = f"/{SERVICE_NAME}/AddSong"

_Field = descriptor_pb2.FieldDescriptorProto


def _file_descriptor_proto() -> descriptor_pb2.FileDescriptorProto:
    fdp = descriptor_pb2.FileDescriptorProto(
        name="itg_buddy.proto",
        package=PACKAGE,
        syntax="proto3",
    )

    request = fdp.message_type.add(name="AddSongRequest")
    request.field.add(
        name="path_or_url", json_name="pathOrUrl", number=1,
        type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL,
    )
    request.field.add(
        name="overwrite", json_name="overwrite", number=2,
        type=_Field.TYPE_BOOL, label=_Field.LABEL_OPTIONAL,
    )

    response = fdp.message_type.add(name="AddSongResponse")
    response.field.add(
        name="added_song", json_name="addedSong", number=1,
        type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL,
    )
    response.field.add(
        name="destination", json_name="destination", number=2,
        type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL,
    )

    service = fdp.service.add(name="SimfileManagement")
    service.method.add(
        name="AddSong",
        input_type=f".{PACKAGE}.AddSongRequest",
        output_type=f".{PACKAGE}.AddSongResponse",
    )
    return fdp


# Private pool so the names never collide with protoc-generated modules
# registered in the default pool.
_POOL = descriptor_pool.DescriptorPool()
_POOL.AddSerializedFile(_file_descriptor_proto().SerializeToString())

AddSongRequest = message_factory.GetMessageClass(
    _POOL.FindMessageTypeByName(f"{PACKAGE}.AddSongRequest")
)
AddSongResponse = message_factory.GetMessageClass(
    _POOL.FindMessageTypeByName(f"{PACKAGE}.AddSongResponse")
)
