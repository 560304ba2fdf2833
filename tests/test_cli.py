import json

from typer.testing import CliRunner

from adverity_client.cli import app, parse_parameters

runner = CliRunner()

INSTANCE_URL = "https://acme.example.com"
API = f"{INSTANCE_URL}/api"
AUTH = ["--instance-url", INSTANCE_URL, "--token", "secret"]


def test_types_list_renders_table(requests_mock):
    requests_mock.get(
        f"{API}/connection-types/",
        json={
            "count": 1,
            "results": [{"id": 1, "name": "Google Ads", "slug": "google-ads", "is_deprecated": False}],
        },
    )

    result = runner.invoke(app, ["types", "list", "connection", "--search", "google", *AUTH])

    assert result.exit_code == 0
    assert "Google Ads" in result.stdout
    assert requests_mock.last_request.qs == {"search": ["google"]}


def test_types_list_json_output(requests_mock):
    requests_mock.get(
        f"{API}/target-types/",
        json={"count": 1, "results": [{"id": 4, "name": "BigQuery", "targets": "/t/"}]},
    )

    result = runner.invoke(app, ["types", "list", "destination", "--json", *AUTH])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload[0]["name"] == "BigQuery"
    assert payload[0]["targets"] == "/t/"


def test_types_list_rejects_unknown_kind():
    result = runner.invoke(app, ["types", "list", "widgets", *AUTH])

    assert result.exit_code != 0


def test_workspaces_create_sends_parameters(requests_mock):
    matcher = requests_mock.post(f"{API}/stacks/", json={"id": 7, "slug": "acme", "name": "Acme"})

    result = runner.invoke(
        app,
        [
            "workspaces",
            "create",
            "--name",
            "Acme",
            "--datalake-id",
            "12",
            "--param",
            "region=eu",
            "--param",
            "default_manage_extract_names=true",
            *AUTH,
        ],
    )

    assert result.exit_code == 0
    assert matcher.last_request.json() == {
        "name": "Acme",
        "datalake_id": 12,
        "region": "eu",
        "default_manage_extract_names": True,
    }
    assert json.loads(result.stdout)["slug"] == "acme"


def test_workspaces_get_reports_request_errors(requests_mock):
    requests_mock.get(f"{API}/stacks/missing/", status_code=404, text='{"detail":"Not found."}')

    result = runner.invoke(app, ["workspaces", "get", "missing", *AUTH])

    assert result.exit_code == 1
    assert "status 404" in result.stderr
    assert "Not found." in result.stderr


def test_workspaces_delete(requests_mock):
    matcher = requests_mock.delete(f"{API}/stacks/acme/", status_code=204)

    result = runner.invoke(app, ["workspaces", "delete", "acme", *AUTH])

    assert result.exit_code == 0
    assert matcher.called
    assert "deleted" in result.stdout


def test_datastreams_schedule_patches_short_path(requests_mock):
    matcher = requests_mock.patch(f"{API}/datastreams/11/", json={"id": 11, "enabled": False})

    result = runner.invoke(app, ["datastreams", "schedule", "11", "--disabled", *AUTH])

    assert result.exit_code == 0
    assert matcher.last_request.json() == {"enabled": False}


def test_datastreams_get_uses_env_credentials(requests_mock):
    matcher = requests_mock.get(f"{API}/datastream-types/4/datastreams/11/", json={"id": 11})

    result = runner.invoke(
        app,
        ["datastreams", "get", "4", "11"],
        env={"ADVERITY_INSTANCE_URL": INSTANCE_URL, "ADVERITY_AUTH_TOKEN": "env-token"},
    )

    assert result.exit_code == 0
    assert matcher.last_request.headers["Authorization"] == "Token env-token"
    assert json.loads(result.stdout)["id"] == 11


def test_invalid_instance_url_is_a_usage_error():
    result = runner.invoke(
        app, ["workspaces", "get", "acme", "--instance-url", "nonsense", "--token", "t"]
    )

    assert result.exit_code != 0


def test_parse_parameters_coerces_simple_values():
    parameters = parse_parameters(["a=1", "b=2.5", "c=false", "d=null", "e=text", "f=x=y"])

    assert [(p.key, p.value) for p in parameters] == [
        ("a", 1),
        ("b", 2.5),
        ("c", False),
        ("d", None),
        ("e", "text"),
        ("f", "x=y"),
    ]


def test_datastreams_get_prints_schedules_as_received(requests_mock):
    requests_mock.get(
        f"{API}/datastream-types/4/datastreams/11/",
        json={"id": 11, "schedules": [{"cron_preset": "CRON_EVERY_DAY", "not_before_time": "06:00"}]},
    )

    result = runner.invoke(app, ["datastreams", "get", "4", "11", *AUTH])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["schedules"][0]["not_before_time"] == "06:00"
