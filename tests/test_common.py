import pytest

from app.core.errors import DuplicateKey, ValidationFailure
from app.models.property import Property
from app.services.common import commit
from tests.helpers import make_property


def test_unique_violation_is_duplicate_key(client, db, operator_headers):
    make_property(client, operator_headers)

    db.add(Property(id="PRP-100001", name="Copy"))
    with pytest.raises(DuplicateKey):
        commit(db, "Property id already exists")


def test_not_null_violation_is_plain_validation_failure(client, db):
    db.add(Property(id="PRP-200001", name=None))
    with pytest.raises(ValidationFailure) as excinfo:
        commit(db)

    assert not isinstance(excinfo.value, DuplicateKey)
    assert excinfo.value.status_code == 400
    assert db.get(Property, "PRP-200001") is None
