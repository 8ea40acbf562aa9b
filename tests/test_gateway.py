# tests/test_gateway.py
import httpx
import pytest

from linkbuilder.client.gateway import ReferenceDataGateway, ReferenceEntity, ERROR, SUCCESS
from linkbuilder.core.exceptions import DuplicateName, InvalidInput, TransientFetchError


@pytest.fixture
def gateway(client):
    return ReferenceDataGateway(client=client)


def _failing_transport(calls):
    def handler(request):
        calls.append(request)
        return httpx.Response(500, json={"detail": "boom"})
    return httpx.MockTransport(handler)


def test_create_then_exists(gateway):
    created = gateway.create("partner", "Acme")
    assert created.id is not None
    assert created.pending is False
    assert gateway.exists("partner", "Acme") is True
    assert gateway.exists("partner", "Other") is False


def test_second_create_is_duplicate(gateway):
    gateway.create("partner", "Acme")
    with pytest.raises(DuplicateName):
        gateway.create("partner", "Acme")
    # placeholder rolled back, only the confirmed entity remains
    assert [entity.name for entity in gateway.cached("partner")] == ["Acme"]
    assert gateway.state("partner").status == ERROR


def test_blank_name_makes_no_request():
    calls = []
    gateway = ReferenceDataGateway(client=httpx.Client(base_url="http://backend", transport=_failing_transport(calls)))
    with pytest.raises(InvalidInput):
        gateway.create("partner", "   ")
    with pytest.raises(InvalidInput):
        gateway.exists("third_party", "")
    assert calls == []
    assert gateway.cached("partner") == []


def test_create_reconciles_with_server_list(gateway, client):
    client.post("/api/third-parties", json={"name": "Beta"})
    gateway.create("third_party", "Alpha")
    assert [entity.name for entity in gateway.cached("third_party")] == ["Alpha", "Beta"]
    assert gateway.state("third_party").status == SUCCESS


def test_failed_create_rolls_back():
    calls = []
    gateway = ReferenceDataGateway(client=httpx.Client(base_url="http://backend", transport=_failing_transport(calls)))
    with pytest.raises(TransientFetchError):
        gateway.create("partner", "Acme")
    assert len(calls) == 1
    assert gateway.cached("partner") == []
    assert gateway.state("partner").error == "boom"


def test_placeholder_visible_while_pending():
    seen = []

    def handler(request):
        if request.method == "POST":
            seen.extend(gateway.cached("partner"))
            return httpx.Response(201, json={"id": "p-1", "name": "Acme"})
        return httpx.Response(200, json=[{"id": "p-1", "name": "Acme"}])

    gateway = ReferenceDataGateway(client=httpx.Client(base_url="http://backend", transport=httpx.MockTransport(handler)))
    gateway.create("partner", "Acme")

    assert seen == [ReferenceEntity(id=None, name="Acme", pending=True)]
    assert gateway.cached("partner") == [ReferenceEntity(id="p-1", name="Acme")]


def test_refresh_failure_leaves_notice():
    def handler(request):
        if request.method == "POST":
            return httpx.Response(201, json={"id": "p-1", "name": "Acme"})
        return httpx.Response(503)

    gateway = ReferenceDataGateway(client=httpx.Client(base_url="http://backend", transport=httpx.MockTransport(handler)))
    created = gateway.create("partner", "Acme")

    assert created.name == "Acme"
    assert gateway.cached("partner") == [created]
    state = gateway.state("partner")
    assert state.status == SUCCESS
    assert state.notice == "Acme was added but the list could not be refreshed"


def test_list_failure_raises_and_choices_fall_back():
    calls = []
    gateway = ReferenceDataGateway(client=httpx.Client(base_url="http://backend", transport=_failing_transport(calls)))
    with pytest.raises(TransientFetchError):
        gateway.list("partner")
    assert gateway.choices("partner") == []


def test_network_error_is_transient():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    gateway = ReferenceDataGateway(client=httpx.Client(base_url="http://backend", transport=httpx.MockTransport(handler)))
    with pytest.raises(TransientFetchError):
        gateway.exists("partner", "Acme")


def test_controller_uses_gateway_choices(gateway, client):
    from linkbuilder.form.controller import CampaignFormController

    client.post("/api/partners", json={"name": "Zeta"})
    client.post("/api/partners", json={"name": "Acme"})
    form = CampaignFormController(gateway=gateway)
    form.set_field("partnering", True)
    assert form.choices("partner_name") == ["Acme", "Zeta"]


def _html_transport(status_code):
    def handler(request):
        return httpx.Response(status_code, text="<html>ok</html>")
    return httpx.MockTransport(handler)


def test_unreadable_create_reply_rolls_back():
    gateway = ReferenceDataGateway(client=httpx.Client(base_url="http://backend", transport=_html_transport(201)))
    with pytest.raises(TransientFetchError):
        gateway.create("partner", "Acme")
    assert gateway.cached("partner") == []
    assert gateway.state("partner").status == ERROR


def test_create_reply_missing_fields_rolls_back():
    def handler(request):
        return httpx.Response(201, json={"name": "Acme"})

    gateway = ReferenceDataGateway(client=httpx.Client(base_url="http://backend", transport=httpx.MockTransport(handler)))
    with pytest.raises(TransientFetchError):
        gateway.create("partner", "Acme")
    assert gateway.cached("partner") == []
    assert gateway.state("partner").status == ERROR


def test_unreadable_list_falls_back_to_empty_choices():
    gateway = ReferenceDataGateway(client=httpx.Client(base_url="http://backend", transport=_html_transport(200)))
    with pytest.raises(TransientFetchError):
        gateway.list("partner")
    assert gateway.state("partner").status == ERROR
    assert gateway.choices("partner") == []


def test_controller_choices_survive_unreadable_list():
    from linkbuilder.form.controller import CampaignFormController

    gateway = ReferenceDataGateway(client=httpx.Client(base_url="http://backend", transport=_html_transport(200)))
    form = CampaignFormController(gateway=gateway)
    form.set_field("partnering", True)
    assert form.choices("partner_name") == []


def test_exists_trims_the_name(gateway):
    gateway.create("partner", "Acme")
    assert gateway.exists("partner", " Acme ") is True
    with pytest.raises(DuplicateName):
        gateway.create("partner", " Acme ")


def test_exists_records_state(gateway):
    gateway.exists("partner", "Acme")
    assert gateway.state("partner").status == SUCCESS


def test_failed_check_records_error():
    calls = []
    gateway = ReferenceDataGateway(client=httpx.Client(base_url="http://backend", transport=_failing_transport(calls)))
    with pytest.raises(TransientFetchError):
        gateway.exists("third_party", "Agency")
    state = gateway.state("third_party")
    assert state.status == ERROR
    assert state.error == "boom"


def test_unreadable_check_reply():
    gateway = ReferenceDataGateway(client=httpx.Client(base_url="http://backend", transport=_html_transport(200)))
    with pytest.raises(TransientFetchError):
        gateway.exists("partner", "Acme")
    assert gateway.state("partner").status == ERROR
