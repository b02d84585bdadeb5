import pytest

from services import admin as admin_svc
from services import auth, persistence, speakers, storage


def test_seed_and_counts(data_dir):
    counts = admin_svc.seed_sample_content()
    assert counts == {'speakers': 6, 'teams': 4, 'partners': 8, 'faq': 3}
    dashboard = admin_svc.get_dashboard_counts()
    assert dashboard['speakers'] == 6
    assert dashboard['partners'] == 8
    assert dashboard['partners_gold'] == 2
    assert dashboard['about_images'] == 0
    assert all(r.ok for r in admin_svc.check_sequences())


def test_export_csv(data_dir):
    assert admin_svc.export_to_csv('speakers') == ""
    speakers.create_speaker("B", "t", "https://x/b.png")
    speakers.create_speaker("A", "t", "https://x/a.png")
    csv_text = admin_svc.export_to_csv('speakers')
    lines = csv_text.strip().splitlines()
    assert lines[0].startswith("id,")
    assert len(lines) == 3
    assert ",B," in lines[1]
    with pytest.raises(ValueError):
        admin_svc.export_to_csv('admins')


def test_repair_all_sequences(data_dir):
    ids = [speakers.create_speaker(n, "t", "https://x/p.png").id for n in "ABC"]
    persistence.update('speakers', ids[2], {'order_index': 5})
    assert not all(r.ok for r in admin_svc.check_sequences())
    assert admin_svc.repair_all_sequences() == 1
    assert all(r.ok for r in admin_svc.check_sequences())


def test_reset_keeps_admins(data_dir):
    auth.sign_up("a@example.com", "gizli123")
    admin_svc.seed_sample_content()
    admin_svc.reset_all_data()
    assert admin_svc.get_dashboard_counts()['speakers'] == 0
    assert auth.has_admins()


def test_reset_removes_uploaded_images(data_dir):
    url = speakers.upload_speaker_photo("me.png", b"png", "image/png")
    speakers.create_speaker("A", "t", url)
    assert admin_svc.reset_all_data() == 1
    assert storage.local_file(url) is None
    assert speakers.list_speakers() == []
    assert admin_svc.reset_all_data() == 0
