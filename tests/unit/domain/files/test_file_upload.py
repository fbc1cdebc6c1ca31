from dataclasses import FrozenInstanceError

import pytest

from fotition_client.domain.files import FileUpload


def test_file_upload_keeps_constructor_values():
    upload = FileUpload("report.pdf", "application/pdf", bytes([0x25, 0x50, 0x44, 0x46]))

    assert upload.name == "report.pdf"
    assert upload.mime_type == "application/pdf"
    assert upload.data == b"%PDF"
    assert upload.param_name == ""


def test_param_name_can_be_reassigned_without_touching_other_fields():
    upload = FileUpload("report.pdf", "application/pdf", b"%PDF")

    upload.param_name = "file"
    assert upload.param_name == "file"

    upload.param_name = "attachment"
    upload.param_name = ""
    upload.param_name = "photo[]"
    assert upload.param_name == "photo[]"

    assert upload.name == "report.pdf"
    assert upload.mime_type == "application/pdf"
    assert upload.data == b"%PDF"


def test_empty_inputs_are_accepted():
    upload = FileUpload("", "", b"")

    assert upload.name == ""
    assert upload.mime_type == ""
    assert upload.data == b""
    assert upload.size_bytes == 0


@pytest.mark.parametrize("field", ["name", "mime_type", "data"])
def test_read_only_fields_cannot_be_assigned(field):
    upload = FileUpload("a.txt", "text/plain", b"hello")

    with pytest.raises(FrozenInstanceError):
        setattr(upload, field, b"x" if field == "data" else "x")

    with pytest.raises(FrozenInstanceError):
        delattr(upload, field)

    assert upload.name == "a.txt"
    assert upload.mime_type == "text/plain"
    assert upload.data == b"hello"


def test_data_is_copied_from_mutable_buffers():
    buffer = bytearray(b"abc")
    upload = FileUpload("a.bin", "application/octet-stream", buffer)

    buffer[0] = ord("z")

    assert upload.data == b"abc"
    assert isinstance(upload.data, bytes)


def test_memoryview_payload_is_accepted():
    upload = FileUpload("a.bin", "application/octet-stream", memoryview(b"\x00\x01"))

    assert upload.data == b"\x00\x01"
    assert upload.size_bytes == 2


def test_instances_are_independent_values():
    first = FileUpload("a.png", "image/png", b"1")
    second = FileUpload("b.png", "image/png", b"2")

    first.param_name = "avatar"

    assert second.param_name == ""
    assert first != second
    assert FileUpload("a.png", "image/png", b"1") == FileUpload("a.png", "image/png", b"1")


def test_param_name_cannot_be_deleted():
    upload = FileUpload("a.txt", "text/plain", b"hello")
    upload.param_name = "file"

    with pytest.raises(FrozenInstanceError):
        del upload.param_name

    assert upload.param_name == "file"
