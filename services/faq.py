from typing import List
import logging

from domain.models import FAQ, faq_from_dict
from services import persistence, uploads
from services.errors import reraise

logger = logging.getLogger(__name__)

TABLE = 'faq'

_REQUIRED = "Lütfen soru ve cevap alanlarını doldurun"


def _require(question: str, answer: str):
    try:
        uploads.require_fields({'Soru': question, 'Cevap': answer})
    except ValueError as e:
        raise e.__class__(_REQUIRED) from e


def list_faqs() -> List[FAQ]:
    with reraise("SSS yüklenirken bir hata oluştu"):
        rows = persistence.query(TABLE, order_by='created_at')
    return [faq_from_dict(r) for r in rows]


def create_faq(question: str, answer: str) -> FAQ:
    _require(question, answer)
    with reraise("SSS eklenirken bir hata oluştu"):
        row = persistence.insert(TABLE, {
            'question_text': question.strip(),
            'answer_text': answer.strip(),
        })
    logger.info("faq created id=%s", row['id'])
    return faq_from_dict(row)


def update_faq(faq_id: str, question: str, answer: str) -> FAQ:
    _require(question, answer)
    with reraise("SSS güncellenirken bir hata oluştu"):
        row = persistence.update(TABLE, faq_id, {
            'question_text': question.strip(),
            'answer_text': answer.strip(),
            'updated_at': persistence.utc_now_iso(),
        })
    return faq_from_dict(row)


def delete_faq(faq_id: str):
    # FAQ rows are removed outright, not soft-deleted
    with reraise("SSS silinirken bir hata oluştu"):
        persistence.delete(TABLE, faq_id)
