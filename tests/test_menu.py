"""
Unit tests for InspectionService and the console menu
"""
import io

import pytest

from inspections.menu import INVALID_CHOICE, main, run_menu
from inspections.report import NO_MATCHES
from inspections.services import InspectionService


@pytest.mark.unit
class TestInspectionService:
    """Test InspectionService class."""

    def test_from_file(self, data_file, sample_lines):
        service = InspectionService.from_file(data_file)
        assert len(service) == len(sample_lines)
        assert isinstance(service.records, tuple)

    def test_from_missing_file(self, tmp_path):
        service = InspectionService.from_file(tmp_path / "missing.csv")

        assert len(service) == 0
        assert service.overall_summary().total == 0
        assert service.risk_distribution().percentages == {"H": 0.0, "M": 0.0, "L": 0.0}
        assert service.neighborhood_summary().empty
        assert service.search("joe") == []

    def test_queries(self, sample_records):
        service = InspectionService(sample_records)

        assert service.overall_summary().passing == 3
        assert service.risk_distribution().counts == {"H": 2, "M": 1, "L": 1}
        assert len(service.neighborhood_summary()) == 3
        assert len(service.search("joe")) == 2

    def test_queries_leave_records_untouched(self, sample_records):
        service = InspectionService(sample_records)
        before = service.records

        service.overall_summary()
        service.risk_distribution()
        service.neighborhood_summary()
        service.search("a")

        assert service.records == before


def run(service, text):
    stdout = io.StringIO()
    run_menu(service, io.StringIO(text), stdout)
    return stdout.getvalue()


@pytest.mark.unit
class TestRunMenu:
    """Test the menu loop with in-memory streams."""

    @pytest.fixture
    def service(self, sample_records):
        return InspectionService(sample_records)

    def test_exit(self, service):
        output = run(service, "5\n")
        assert "1. Display overall inspection information" in output
        assert output.endswith("Exiting the program\n")

    def test_overall_info(self, service):
        output = run(service, "1\n5\n")
        assert "Number of restaurants: 5" in output

    def test_risk_percentages(self, service):
        output = run(service, "2\n5\n")
        assert "High Risk: 50.0%" in output

    def test_neighborhood_breakdown(self, service):
        output = run(service, "3\n5\n")
        assert "Passed Cond. Pass" in output
        assert "Riverside" in output

    def test_search(self, service):
        output = run(service, "4\nJOE\n5\n")
        assert "Enter restaurant to search for: " in output
        assert "Restaurant: Joe's Diner" in output
        assert "Restaurant: JOE'S GRILL" in output

    def test_search_no_match(self, service):
        assert NO_MATCHES in run(service, "4\nsushi\n5\n")

    @pytest.mark.parametrize("choice", ["0", "6", "abc", ""])
    def test_invalid_choice_reprompts(self, service, choice):
        output = run(service, f"{choice}\n5\n")
        assert INVALID_CHOICE in output
        assert output.count("Select a menu option:") == 2

    def test_end_of_input_exits(self, service):
        output = run(service, "1\n")
        assert "Number of restaurants: 5" in output
        assert "Exiting the program" not in output


@pytest.mark.unit
class TestMain:
    """Test startup with prompt and command-line path."""

    def test_prompts_for_file(self, data_file):
        stdout = io.StringIO()
        assert main([], io.StringIO(f"{data_file} ignored\n1\n5\n"), stdout) == 0

        output = stdout.getvalue()
        assert output.startswith("Enter the data file to use: ")
        assert "Number of restaurants: 5" in output

    def test_path_argument_skips_prompt(self, data_file):
        stdout = io.StringIO()
        main([str(data_file)], io.StringIO("5\n"), stdout)
        assert "Enter the data file to use" not in stdout.getvalue()

    def test_missing_file_runs_with_no_records(self, tmp_path):
        stdout = io.StringIO()
        main([str(tmp_path / "missing.csv")], io.StringIO("1\n2\n5\n"), stdout)

        output = stdout.getvalue()
        assert "Number of restaurants: 0" in output
        assert "No recent passing inspections found." in output
        assert "High Risk: 0.0%" in output

    def test_no_input_at_prompt(self):
        assert main([], io.StringIO(""), io.StringIO()) == 0
