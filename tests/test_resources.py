import pytest

from adverity_client import AdverityClient, Parameter
from adverity_client.exceptions import SerializationError, ValidationError
from adverity_client.models import (
    AuthorizationConfig,
    ConnectionConfig,
    DatastreamCreateConfig,
    DatastreamScheduleConfig,
    DatastreamUpdateConfig,
    DestinationConfig,
    DestinationMappingConfig,
    Schedule,
    WorkspaceConfig,
)
from adverity_client.resources.base import build_path

API = "https://acme.example.com/api"


def build_client():
    return AdverityClient(instance_url="https://acme.example.com", token="t")


def test_build_path_quotes_segments_and_ends_with_slash():
    assert build_path("stacks") == "stacks/"
    assert build_path("connection-types", 3, "connections", 9) == "connection-types/3/connections/9/"
    assert build_path("stacks", "a/b c") == "stacks/a%2Fb%20c/"


def test_create_workspace_sends_flattened_body(requests_mock):
    client = build_client()
    matcher = requests_mock.post(
        f"{API}/stacks/",
        status_code=201,
        json={"id": 7, "slug": "acme", "name": "Acme", "counts": {"connections": 0}},
    )

    workspace = client.workspaces.create(
        WorkspaceConfig(name="Acme", datalake_id=12, parameters=[Parameter("region", "eu")])
    )

    assert matcher.last_request.json() == {"name": "Acme", "datalake_id": 12, "region": "eu"}
    assert workspace.slug == "acme"
    assert workspace.counts.connections == 0


def test_workspace_item_operations_use_slug_path(requests_mock):
    client = build_client()
    requests_mock.get(f"{API}/stacks/acme/", json={"id": 7, "slug": "acme"})
    patch = requests_mock.patch(f"{API}/stacks/acme/", json={"id": 7, "name": "Renamed"})
    requests_mock.delete(f"{API}/stacks/acme/", status_code=204)

    assert client.workspaces.read("acme").id == 7
    assert client.workspaces.update("acme", WorkspaceConfig(name="Renamed")).name == "Renamed"
    assert patch.last_request.method == "PATCH"
    assert patch.last_request.json() == {"name": "Renamed"}
    assert client.workspaces.delete("acme") is None


@pytest.mark.parametrize(
    ("resource_name", "config"),
    [
        ("connections", ConnectionConfig(name="ga", stack_id=7)),
        ("authorizations", AuthorizationConfig(name="ga", stack_id=7)),
    ],
)
def test_connection_family_paths(requests_mock, resource_name, config):
    client = build_client()
    resource = getattr(client, resource_name)
    create = requests_mock.post(f"{API}/connection-types/3/connections/", json={"id": 9, "stack": 7})
    requests_mock.get(f"{API}/connection-types/3/connections/9/", json={"id": 9, "is_authorized": True})
    requests_mock.patch(f"{API}/connection-types/3/connections/9/", json={"id": 9, "name": "new"})
    requests_mock.delete(f"{API}/connection-types/3/connections/9/", status_code=204)

    created = resource.create(3, config)
    assert create.last_request.json() == {"name": "ga", "stack": 7}
    assert created.stack_id == 7
    assert resource.read(3, 9).is_authorized is True
    assert resource.update(3, 9, type(config)(name="new")).name == "new"
    assert resource.delete(3, 9) is None


def test_datastream_create_and_update(requests_mock):
    client = build_client()
    create = requests_mock.post(
        f"{API}/datastream-types/4/datastreams/",
        json={"id": 11, "datatype": "Live", "schedules": [{"cron_type": "day"}]},
    )
    update = requests_mock.patch(
        f"{API}/datastream-types/4/datastreams/11/",
        json={"id": 11, "retention_number": 30},
    )

    created = client.datastreams.create(
        4,
        DatastreamCreateConfig(
            name="daily",
            auth_id=2,
            data_type="Live",
            parameters=[Parameter("accounts", ["123"])],
        ),
    )
    updated = client.datastreams.update(4, 11, DatastreamUpdateConfig(retention_number=30))

    assert create.last_request.json() == {
        "name": "daily",
        "auth": 2,
        "datatype": "Live",
        "accounts": ["123"],
    }
    assert created.schedules[0].cron_type == "day"
    assert update.last_request.json() == {"retention_number": 30}
    assert updated.retention_number == 30


def test_datastream_read_no_content_returns_none(requests_mock):
    client = build_client()
    requests_mock.get(f"{API}/datastream-types/4/datastreams/11/", status_code=204)

    assert client.datastreams.read(4, 11) is None


def test_datastream_schedule_update_uses_short_path(requests_mock):
    client = build_client()
    matcher = requests_mock.patch(f"{API}/datastreams/11/", json={"id": 11, "enabled": False})

    result = client.datastreams.update_schedule(
        11,
        DatastreamScheduleConfig(
            enabled=False,
            schedules=[Schedule(cron_preset="CRON_EVERY_DAY", not_before_date="2025-05-01")],
        ),
    )

    assert matcher.last_request.json() == {
        "enabled": False,
        "schedules": [{"cron_preset": "CRON_EVERY_DAY", "not_before_date": "2025-05-01"}],
    }
    assert result.enabled is False


def test_invalid_schedule_is_rejected_before_request(requests_mock):
    client = build_client()
    matcher = requests_mock.patch(f"{API}/datastreams/11/", json={})

    with pytest.raises(ValidationError):
        client.datastreams.update_schedule(
            11, DatastreamScheduleConfig(schedules=[Schedule(not_before_time="6am")])
        )

    assert not matcher.called


def test_destination_paths(requests_mock):
    client = build_client()
    create = requests_mock.post(f"{API}/target-types/2/targets/", json={"id": 5, "project": "p"})
    requests_mock.get(f"{API}/target-types/2/targets/5/", json={"id": 5})
    requests_mock.patch(f"{API}/target-types/2/targets/5/", json={"id": 5, "force_string": True})
    requests_mock.delete(f"{API}/target-types/2/targets/5/", json={"id": 5})

    created = client.destinations.create(
        2,
        DestinationConfig(
            name="bq",
            stack_id=7,
            auth_id=2,
            parameters=[Parameter("project", "p"), Parameter("dataset", "d")],
        ),
    )

    assert create.last_request.json() == {
        "name": "bq",
        "stack": 7,
        "auth": 2,
        "project": "p",
        "dataset": "d",
    }
    assert created.project == "p"
    assert client.destinations.read(2, 5).id == 5
    assert client.destinations.update(2, 5, DestinationConfig(force_string=True)).force_string
    assert client.destinations.delete(2, 5).id == 5


def test_destination_mapping_paths(requests_mock):
    client = build_client()
    base = f"{API}/target-types/2/targets/5/mappings/"
    create = requests_mock.post(base, json={"id": 9, "target": 5, "datastream": 11})
    requests_mock.get(f"{base}9/", json={"id": 9, "table_name": "t"})
    requests_mock.patch(f"{base}9/", json={"id": 9, "enabled": False})
    requests_mock.delete(f"{base}9/", status_code=204)

    created = client.destination_mappings.create(
        2, 5, DestinationMappingConfig(datastream_id=11, enabled=True, table_name="t")
    )

    assert create.last_request.json() == {"datastream": 11, "enabled": True, "table_name": "t"}
    assert created.destination_id == 5
    assert client.destination_mappings.read(2, 5, 9).table_name == "t"
    assert client.destination_mappings.update(
        2, 5, 9, DestinationMappingConfig(enabled=False)
    ).enabled is False
    assert client.destination_mappings.delete(2, 5, 9) is None


def test_response_shape_mismatch_names_type(requests_mock):
    client = build_client()
    requests_mock.get(f"{API}/stacks/acme/", json=["unexpected"])

    with pytest.raises(SerializationError) as excinfo:
        client.workspaces.read("acme")

    assert "WorkspaceResponse" in str(excinfo.value)


def test_invalid_json_response_is_a_serialization_error(requests_mock):
    client = build_client()
    requests_mock.get(f"{API}/stacks/acme/", text="<html>")

    with pytest.raises(SerializationError):
        client.workspaces.read("acme")


@pytest.mark.parametrize(
    "body",
    [
        {"id": "seven"},
        {"id": 7, "name": 5},
        {"id": True},
        {"id": 7, "counts": {"connections": "many"}},
        {"id": 7, "permissions": {"isViewer": "yes"}},
    ],
    ids=["int-as-string", "string-as-int", "int-as-bool", "nested-int", "nested-bool"],
)
def test_response_scalar_type_mismatch_names_type(requests_mock, body):
    client = build_client()
    requests_mock.get(f"{API}/stacks/acme/", json=body)

    with pytest.raises(SerializationError) as excinfo:
        client.workspaces.read("acme")

    assert "WorkspaceResponse" in str(excinfo.value)


def test_schedule_field_type_mismatch_is_a_serialization_error(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{API}/datastream-types/4/datastreams/11/",
        json={"id": 11, "schedules": [{"cron_interval": "daily"}]},
    )

    with pytest.raises(SerializationError):
        client.datastreams.read(4, 11)
