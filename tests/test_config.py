import os
from datetime import date
from pathlib import Path

import pytest

from payschedule import InvalidYearError, UnwritableDestinationError
from payschedule.config import (
    DEFAULT_OUTPUT,
    OUTPUT_ENV,
    YEAR_ENV,
    ScheduleConfig,
    default_year,
    validate_destination,
    validate_year,
)


class TestValidateYear:
    def test_current_year(self, today):
        assert validate_year(today.year, today) == today.year

    def test_window_lower_bound_is_exclusive(self, today):
        with pytest.raises(InvalidYearError):
            validate_year(today.year - 20, today)

    def test_window_upper_bound_is_exclusive(self, today):
        with pytest.raises(InvalidYearError):
            validate_year(today.year + 20, today)

    def test_inside_window(self, today):
        assert validate_year(today.year - 19, today) == today.year - 19
        assert validate_year(today.year + 19, today) == today.year + 19

    def test_error_details(self, today):
        with pytest.raises(InvalidYearError) as excinfo:
            validate_year(1900, today)
        assert excinfo.value.year == 1900
        assert excinfo.value.lower == today.year - 20
        assert "out of range" in str(excinfo.value)

    def test_is_a_value_error(self, today):
        with pytest.raises(ValueError):
            validate_year(3000, today)


class TestValidateDestination:
    def test_bare_file_name_uses_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert validate_destination("payroll.csv") == Path("payroll.csv")

    def test_strips_whitespace(self, tmp_path):
        target = tmp_path / "payroll.csv"
        assert validate_destination(f"  {target}  ") == target

    def test_missing_directory(self, tmp_path):
        target = tmp_path / "missing" / "payroll.csv"
        with pytest.raises(UnwritableDestinationError) as excinfo:
            validate_destination(target)
        assert excinfo.value.directory == target.parent
        assert isinstance(excinfo.value, OSError)

    def test_existing_directory_is_rejected(self, tmp_path):
        target = tmp_path / "out"
        target.mkdir()
        with pytest.raises(UnwritableDestinationError):
            validate_destination(target)

    def test_read_only_file_is_rejected(self, tmp_path, monkeypatch):
        target = tmp_path / "payroll.csv"
        target.write_text("locked\n", encoding="utf-8")
        real_access = os.access
        monkeypatch.setattr(
            "payschedule.config.os.access",
            lambda p, mode: False if Path(p) == target else real_access(p, mode),
        )
        with pytest.raises(UnwritableDestinationError):
            validate_destination(target)

    def test_existing_writable_file_is_accepted(self, tmp_path):
        target = tmp_path / "payroll.csv"
        target.write_text("old\n", encoding="utf-8")
        assert validate_destination(target) == target


class TestScheduleConfig:
    def test_defaults(self, tmp_path, monkeypatch, today):
        monkeypatch.chdir(tmp_path)
        config = ScheduleConfig.from_values(today=today)
        assert config.year == today.year
        assert config.output_path == Path(DEFAULT_OUTPUT)

    def test_explicit_values(self, tmp_path, today):
        target = tmp_path / "payroll-2012.csv"
        config = ScheduleConfig.from_values(2012, target, today=today)
        assert config == ScheduleConfig(year=2012, output_path=target)

    def test_env_defaults(self, tmp_path, monkeypatch, today):
        target = tmp_path / "env.csv"
        monkeypatch.setenv(OUTPUT_ENV, str(target))
        monkeypatch.setenv(YEAR_ENV, "2030")
        config = ScheduleConfig.from_values(today=today)
        assert config.year == 2030
        assert config.output_path == target

    def test_invalid_env_year(self, monkeypatch, today):
        monkeypatch.setenv(YEAR_ENV, "next")
        with pytest.raises(ValueError):
            default_year(today)

    def test_invalid_year(self, tmp_path, today):
        with pytest.raises(InvalidYearError):
            ScheduleConfig.from_values(today.year + 25, tmp_path / "x.csv", today=today)

    def test_is_frozen(self, tmp_path, today):
        config = ScheduleConfig.from_values(2024, tmp_path / "x.csv", today=today)
        with pytest.raises(AttributeError):
            config.year = 2025

    def test_year_falls_back_to_clock(self, monkeypatch):
        assert default_year() == date.today().year
