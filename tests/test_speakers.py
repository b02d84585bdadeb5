import pytest

from services import speakers, storage
from services.errors import NotFoundError, ValidationError

PHOTO = "https://placehold.co/400x400.png"


def test_create_appends_in_order(data_dir):
    a = speakers.create_speaker("Ayşe Yılmaz", "Kurucu", PHOTO)
    b = speakers.create_speaker("Can Kaya", "Tasarımcı", PHOTO, twitter=" @can ", linkedin="")
    assert (a.order_index, b.order_index) == (0, 1)
    assert b.twitter == "@can"
    assert b.linkedin is None
    assert [s.name for s in speakers.list_speakers()] == ["Ayşe Yılmaz", "Can Kaya"]


def test_create_requires_photo(data_dir):
    with pytest.raises(ValidationError):
        speakers.create_speaker("Ayşe", "Kurucu", "")
    assert speakers.list_speakers() == []


def test_update_keeps_photo_when_none_given(data_dir):
    s = speakers.create_speaker("Ayşe", "Kurucu", PHOTO)
    updated = speakers.update_speaker(s.id, "Ayşe Y.", "CTO")
    assert updated.photo == PHOTO
    assert updated.title == "CTO"
    assert updated.order_index == 0


def test_update_missing_speaker(data_dir):
    with pytest.raises(NotFoundError):
        speakers.update_speaker("spk_missing", "X", "Y")


def test_delete_and_move(data_dir):
    ids = [speakers.create_speaker(n, "t", PHOTO).id for n in ["A", "B", "C", "D"]]
    speakers.move_speaker(ids[3], 0)
    assert [s.name for s in speakers.list_speakers()] == ["D", "A", "B", "C"]
    speakers.delete_speaker(ids[0])
    remaining = speakers.list_speakers()
    assert [s.name for s in remaining] == ["D", "B", "C"]
    assert [s.order_index for s in remaining] == [0, 1, 2]
    with pytest.raises(NotFoundError):
        speakers.get_speaker(ids[0])


def test_upload_photo(data_dir):
    url = speakers.upload_speaker_photo("me.PNG", b"\x89PNG", "image/png")
    assert "/images/speakers/" in url
    assert url.endswith(".png")
    assert storage.local_file(url) is not None


def test_upload_rejects_non_images_and_large_files(data_dir):
    with pytest.raises(ValidationError):
        speakers.upload_speaker_photo("cv.pdf", b"%PDF", "application/pdf")
    with pytest.raises(ValidationError):
        speakers.upload_speaker_photo("big.png", b"0" * (5 * 1024 * 1024 + 1), "image/png")
    assert not (data_dir / 'storage').exists()
