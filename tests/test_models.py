# tests/test_models.py
from linkbuilder.models.reference import Partner
from linkbuilder.schemas.reference import ReferenceResponse


def test_base_model_has_no_serializer():
    assert not hasattr(Partner, "to_dict")


def test_response_reads_attributes(db):
    partner = Partner(name="Acme")
    db.add(partner)
    db.commit()
    db.refresh(partner)
    assert ReferenceResponse.model_validate(partner).name == "Acme"
    assert ReferenceResponse.model_config["from_attributes"] is True
