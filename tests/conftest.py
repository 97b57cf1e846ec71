"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from resultportal.config.settings import CollegeConfig, PortalConfig

HEADER = "roll_no,student_name,standard,marathi,hindi,english,maths,science,total,result"


@pytest.fixture
def sample_csv() -> str:
    """Two-student sheet as published by a school."""
    return (
        f"{HEADER}\n"
        "101,Rahul Sharma,5,78,82,88,92,85,425,PASS\n"
        "205,Sneha Gupta,6,85,78,90,88,82,423,PASS"
    )


@pytest.fixture
def class_csv() -> str:
    """Larger sheet spanning several standards, with a failing student."""
    return "\n".join(
        [
            HEADER,
            "101,Rahul Sharma,5,78,82,88,92,85,425,PASS",
            "102,Priya Patel,5,65,70,75,80,72,362,PASS",
            "201,Amit Kumar,6,42,55,60,38,50,245,FAIL",
            "205,Sneha Gupta,6,85,78,90,88,82,423,PASS",
            "301,Rohan Desai,7,30,42,55,28,45,200,FAIL",
            "",
        ]
    )


@pytest.fixture
def data_dir(tmp_path: Path, class_csv: str) -> Path:
    """Data root holding one local results sheet."""
    root = tmp_path / "data"
    root.mkdir()
    (root / "results.csv").write_text(class_csv, encoding="utf-8")
    return root


@pytest.fixture
def portal_config(data_dir: Path) -> PortalConfig:
    """Config with one local college and one remote college."""
    return PortalConfig(
        data_root=data_dir,
        colleges={
            "local": CollegeConfig(name="Springfield Public School", csv_path=Path("results.csv")),
            "remote": CollegeConfig(
                name="Greenwood High School",
                csv_url="https://example.org/sheet.csv",
            ),
        },
    )


@pytest.fixture
def config_file(tmp_path: Path, data_dir: Path) -> Path:
    """Portal YAML pointing at the local sheet."""
    path = tmp_path / "portal.yaml"
    path.write_text(
        f"""
data_root: "{data_dir.as_posix()}"

colleges:
  local:
    name: "Springfield Public School"
    csv_path: "results.csv"
  missing:
    name: "Riverdale College"
    csv_path: "nowhere.csv"

logging:
  level: "WARNING"
""",
        encoding="utf-8",
    )
    return path
