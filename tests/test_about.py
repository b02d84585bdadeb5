import pytest

from services import about, storage
from services.errors import ValidationError


def test_upload_fills_slot(data_dir):
    img = about.upload_about_image("hero.jpg", b"jpg", "image/jpeg", "Ana Sahne", 0)
    assert img.order_index == 0
    assert img.image_url.endswith("-ana-sahne.jpg")
    slots = about.images_by_slot()
    assert list(slots) == [0, 1, 2, 3]
    assert slots[0].id == img.id
    assert slots[1] is None


def test_upload_into_occupied_slot_replaces_image(data_dir):
    old = about.upload_about_image("a.png", b"a", "image/png", "Eski", 2)
    new = about.upload_about_image("b.png", b"b", "image/png", "Yeni", 2)
    images = about.list_about_images()
    assert [i.id for i in images] == [new.id]
    assert storage.local_file(old.image_url) is None
    assert storage.local_file(new.image_url) is not None


def test_upload_requires_name_and_valid_slot(data_dir):
    with pytest.raises(ValidationError) as exc_info:
        about.upload_about_image("a.png", b"a", "image/png", "", 0)
    assert str(exc_info.value) == "Lütfen resim adı ve resim seçiniz"
    with pytest.raises(ValidationError):
        about.upload_about_image("a.png", b"a", "image/png", "Ad", 4)


def test_delete_removes_row_and_blob(data_dir):
    img = about.upload_about_image("a.png", b"a", "image/png", "Ad", 1)
    about.delete_about_image(img.id)
    assert about.list_about_images() == []
    assert storage.local_file(img.image_url) is None


def test_name_with_path_separators_stays_in_about_folder(data_dir):
    old = about.upload_about_image("a.png", b"a", "image/png", "Eski", 3)
    img = about.upload_about_image("b.png", b"b", "image/png", "Sahne/../..\\Arka Plan", 3)
    bucket, path = storage.path_from_public_url(img.image_url)
    assert path.startswith("about/")
    assert path.count("/") == 1
    assert path.endswith("-sahne-arka-plan.png")
    assert storage.local_file(img.image_url) is not None
    assert storage.local_file(old.image_url) is None
