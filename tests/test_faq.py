import pytest

from services import faq, persistence
from services.errors import NotFoundError, ValidationError


def test_create_list_update_delete(data_dir):
    first = faq.create_faq("Nerede?", "İstanbul")
    faq.create_faq("Ne zaman?", "Ekim")
    assert [f.question_text for f in faq.list_faqs()] == ["Nerede?", "Ne zaman?"]

    updated = faq.update_faq(first.id, "Nerede?", "İstanbul, Kongre Merkezi")
    assert updated.answer_text == "İstanbul, Kongre Merkezi"
    assert updated.updated_at

    faq.delete_faq(first.id)
    assert [f.question_text for f in faq.list_faqs()] == ["Ne zaman?"]
    # Hard delete: the row is gone from the table file
    assert persistence.get('faq', first.id, include_deleted=True) is None


def test_blank_fields_rejected(data_dir):
    with pytest.raises(ValidationError) as exc_info:
        faq.create_faq("Soru", " ")
    assert str(exc_info.value) == "Lütfen soru ve cevap alanlarını doldurun"


def test_update_missing_faq(data_dir):
    with pytest.raises(NotFoundError):
        faq.update_faq("faq_missing", "q", "a")
