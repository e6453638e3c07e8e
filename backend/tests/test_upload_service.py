import io
from pathlib import Path

import pytest
from starlette.datastructures import UploadFile

from homestock.core.exceptions import ValidationError
from homestock.services import upload_service


@pytest.fixture
def upload_dir(tmp_path, mocker):
    target = tmp_path / "images"
    mocker.patch.object(upload_service.settings, "UPLOAD_DIR", str(target))
    return target


def test_save_image_names_file_by_timestamp(upload_dir, mocker):
    mocker.patch("homestock.services.upload_service.time.time", return_value=1700000000.123)

    url = upload_service.save_image(UploadFile(io.BytesIO(b"gif89a"), filename="cat.GIF"))

    assert url == "/images/1700000000123.gif"
    assert (upload_dir / "1700000000123.gif").read_bytes() == b"gif89a"


@pytest.mark.parametrize("filename", ["notes.txt", "archive.tar.gz", "noextension", None])
def test_save_image_rejects_other_extensions(upload_dir, filename):
    with pytest.raises(ValidationError) as exc_info:
        upload_service.save_image(UploadFile(io.BytesIO(b"x"), filename=filename))

    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Error uploading file"
    assert not upload_dir.exists() or not any(upload_dir.iterdir())


def test_ensure_upload_dir_creates_nested_path(upload_dir):
    path = upload_service.ensure_upload_dir()

    assert path == Path(upload_dir)
    assert path.is_dir()
