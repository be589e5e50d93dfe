from unittest.mock import Mock

from teamcity_rest_client.client import Teamcity
from teamcity_rest_client.operations.status_report import StatusReport
from teamcity_rest_client.utils.config import Config
from teamcity_rest_client.utils.progress import ProgressTracker
from teamcity_rest_client.utils.report_writer import COLUMNS


def test_one_row_per_build_type_with_latest_build(server):
    rows = StatusReport(Config(), Teamcity("tc.example.com", 1234)).execute()

    assert [(r['project_id'], r['build_type_id']) for r in rows] == [
        ("project54", "bt297"),
        ("project54", "bt296"),
        ("project28", "bt212"),
    ]
    bt297, bt296, bt212 = rows
    assert bt297['build_number'] == "568"
    assert bt297['status'] == "SUCCESS"
    assert bt297['success'] is True
    # newest build listed first wins
    assert bt212['build_number'] == "126"
    assert bt212['status'] == "FAILURE"
    assert bt212['success'] is False
    assert bt212['web_url'] == "http://teamcity.jetbrains.com/viewLog.html?buildId=56264&buildTypeId=bt212"


def test_build_type_without_builds(server):
    rows = StatusReport(Config(), Teamcity("tc.example.com", 1234)).execute()
    bt296 = rows[1]

    assert bt296['build_number'] == ""
    assert bt296['status'] == ""
    assert bt296['success'] is False
    assert bt296['web_url'] == "http://teamcity.jetbrains.com/viewType.html?buildTypeId=bt296"


def test_single_project(server):
    rows = StatusReport(Config(), Teamcity("tc.example.com", 1234)).execute("project28")
    assert [r['build_type_id'] for r in rows] == ["bt212"]


def test_fetches_each_collection_once(server):
    progress = ProgressTracker(enabled=False)
    logger = Mock()
    StatusReport(Config(), Teamcity("tc.example.com", 1234), progress, logger).execute()

    paths = [url.rsplit(':1234', 1)[1] for url, _, _ in server.requested]
    assert sorted(paths) == ['/app/rest/buildTypes', '/app/rest/builds', '/app/rest/projects']
    logger.log.assert_any_call("Status report has 3 rows")


def test_rows_carry_every_report_column(server):
    rows = StatusReport(Config(), Teamcity("tc.example.com", 1234)).execute("Apache Ant")

    assert set(COLUMNS) <= set(rows[0])
    assert rows[0]['build_type_name'] == "Ant trunk"
    assert rows[0]['build_id'] == "56264"
    assert rows[0]['start_date'] == "20111021T123714+0400"
    assert rows[0]['href'] == "http://tc.example.com:1234/app/rest/builds/id:56264"
