"""Integration tests for the CLI commands, CSV export and HTTP API."""

import io
import json

import pandas as pd
import pytest
from click.testing import CliRunner
from fastapi.testclient import TestClient

from fakeusers.api import app
from fakeusers.cli.export import main as export_main
from fakeusers.cli.generate import main as generate_main
from fakeusers.config import Region
from fakeusers.core import generate_page, generate_pages
from fakeusers.utils import CSVHandler

CSV_COLUMNS = ["Number", "Id", "FullName", "Address", "Phone"]


@pytest.mark.integration
class TestCSVHandler:
    """Test CSV conversion of generated records."""

    def test_dataframe_columns(self):
        records = generate_page(Region.USA, 1, "csv", 0, 5)
        df = CSVHandler().records_to_dataframe(records)
        assert list(df.columns) == CSV_COLUMNS
        assert df["Number"].tolist() == [1, 2, 3, 4, 5]

    def test_empty_dataframe_keeps_header(self):
        df = CSVHandler().records_to_dataframe([])
        assert list(df.columns) == CSV_COLUMNS
        assert len(df) == 0

    def test_csv_bytes_round_trip_non_ascii(self):
        records = generate_page(Region.UKRAINE, 2, "csv", 0, 10)
        df = pd.read_csv(
            io.BytesIO(CSVHandler().to_csv_bytes(records)),
            dtype=str,
            keep_default_na=False,
        )
        assert df["FullName"].tolist() == [r.full_name for r in records]
        assert df["Address"].tolist() == [r.address for r in records]

    def test_write_csv(self, tmp_path):
        records = generate_pages(Region.POLAND, 0.5, "file", 0, 1, 4)
        output = tmp_path / "nested" / "out.csv"
        assert CSVHandler().write_csv(records, output) == 8
        df = pd.read_csv(output)
        assert df["Number"].tolist() == list(range(1, 9))


@pytest.mark.integration
class TestGenerateCommand:
    """Test the page generation CLI."""

    def test_json_output(self):
        runner = CliRunner()
        args = ["--region", "USA", "--seed", "abc", "--page-size", "3", "--json"]
        result = runner.invoke(generate_main, args)

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [r["number"] for r in data] == [1, 2, 3]
        assert set(data[0]) == {"number", "id", "fullName", "address", "phone"}

        again = runner.invoke(generate_main, args)
        assert json.loads(again.output) == data

    def test_json_matches_library(self):
        runner = CliRunner()
        result = runner.invoke(
            generate_main,
            [
                "--region", "poland", "--errors", "1.5", "--seed", "lib",
                "--page", "2", "--page-size", "4", "--json",
            ],
        )

        assert result.exit_code == 0, result.output
        expected = [
            r.model_dump(by_alias=True)
            for r in generate_page(Region.POLAND, 1.5, "lib", 2, 4)
        ]
        assert json.loads(result.output) == expected

    def test_table_output_with_stats(self):
        runner = CliRunner()
        result = runner.invoke(
            generate_main,
            ["--region", "Ukraine", "--errors", "2", "--page-size", "2", "--stats"],
        )
        assert result.exit_code == 0, result.output
        assert "Total Errors: 4" in result.output

    def test_config_file_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "generation:\n  region: Poland\n  seed: cfg\n  page_size: 2\n",
            encoding="utf-8",
        )
        runner = CliRunner()
        result = runner.invoke(
            generate_main, ["--config", str(config_file), "--json"]
        )
        assert result.exit_code == 0, result.output
        expected = [
            r.model_dump(by_alias=True)
            for r in generate_page(Region.POLAND, 0, "cfg", 0, 2)
        ]
        assert json.loads(result.output) == expected

    def test_negative_error_rate_fails(self):
        result = CliRunner().invoke(generate_main, ["--errors", "-1"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_negative_page_fails(self):
        result = CliRunner().invoke(generate_main, ["--page", "-2"])
        assert result.exit_code == 1

    def test_unknown_region_rejected_by_click(self):
        result = CliRunner().invoke(generate_main, ["--region", "Germany"])
        assert result.exit_code != 0


@pytest.mark.integration
class TestExportCommand:
    """Test the CSV export CLI."""

    def test_exports_inclusive_page_range(self, tmp_path):
        output = tmp_path / "export.csv"
        result = CliRunner().invoke(
            export_main,
            [
                "--region", "USA", "--errors", "0.5", "--seed", "exp",
                "--from-page", "1", "--to-page", "3", "--page-size", "5",
                "--output", str(output),
            ],
        )

        assert result.exit_code == 0, result.output
        df = pd.read_csv(output, dtype=str, keep_default_na=False)
        assert list(df.columns) == CSV_COLUMNS
        assert df["Number"].tolist() == [str(n) for n in range(6, 21)]

        expected = generate_pages(Region.USA, 0.5, "exp", 1, 3, 5)
        assert df["Id"].tolist() == [r.id for r in expected]
        assert df["Phone"].tolist() == [r.phone for r in expected]

    def test_reversed_range_fails(self, tmp_path):
        result = CliRunner().invoke(
            export_main,
            ["--from-page", "3", "--to-page", "1", "--output", str(tmp_path / "x.csv")],
        )
        assert result.exit_code == 1
        assert not (tmp_path / "x.csv").exists()


@pytest.mark.integration
class TestAPI:
    """Test the HTTP endpoints."""

    @pytest.fixture
    def client(self):
        return TestClient(app)

    def test_root(self, client):
        assert client.get("/").status_code == 200

    def test_get_page(self, client):
        params = {"region": "Poland", "errorCount": 1.5, "page": 2, "seed": "x"}
        response = client.get("/api/fakedata", params=params)

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 20
        assert [r["number"] for r in data] == list(range(41, 61))
        assert set(data[0]) == {"number", "id", "fullName", "address", "phone"}

        expected = [
            r.model_dump(by_alias=True)
            for r in generate_page(Region.POLAND, 1.5, "x", 2)
        ]
        assert data == expected
        assert client.get("/api/fakedata", params=params).json() == data

    def test_unknown_region_is_bad_request(self, client):
        response = client.get("/api/fakedata", params={"region": "Germany"})
        assert response.status_code == 400
        assert "Germany" in response.json()["detail"]

    def test_negative_error_count_is_bad_request(self, client):
        response = client.get(
            "/api/fakedata", params={"region": "USA", "errorCount": -1}
        )
        assert response.status_code == 400

    def test_negative_page_is_bad_request(self, client):
        response = client.get("/api/fakedata", params={"region": "USA", "page": -1})
        assert response.status_code == 400

    def test_export_csv(self, client):
        response = client.get(
            "/api/fakedata/export",
            params={"region": "Ukraine", "errorCount": 1, "fromPage": 0, "toPage": 1},
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "fake_user_data.csv" in response.headers["content-disposition"]

        df = pd.read_csv(io.BytesIO(response.content), dtype=str, keep_default_na=False)
        assert list(df.columns) == CSV_COLUMNS
        assert len(df) == 40

        expected = generate_pages(Region.UKRAINE, 1, "", 0, 1)
        assert df["FullName"].tolist() == [r.full_name for r in expected]

    def test_export_reversed_range_is_bad_request(self, client):
        response = client.get(
            "/api/fakedata/export",
            params={"region": "USA", "fromPage": 2, "toPage": 1},
        )
        assert response.status_code == 400
