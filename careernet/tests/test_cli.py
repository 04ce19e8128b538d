"""Tests for the careernet command line."""

import pytest
from click.testing import CliRunner

from careernet.cli import cli

NETWORK_YAML = """
contacts:
  - {id: "1", name: Alice Johnson, company: TechCorp, role: Engineer, school: MIT}
  - {id: "2", name: Bob Smith, school: Stanford University, graduation_year: 2016}
  - {id: "3", name: Charlie Davis, is_influencer: true, influence_score: 78}
  - {id: "5", name: Eve Adams, is_industry_leader: true, influence_score: 92}
people:
  - {id: "4", name: Diana Wilson}
connections:
  - {contact_id_a: "1", contact_id_b: "4", relationship_type: colleague}
  - {contact_id_a: "4", contact_id_b: "6", relationship_type: friend}
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def network_file(tmp_path):
    path = tmp_path / "network.yaml"
    path.write_text(NETWORK_YAML)
    return path


def test_path_second_degree(runner, network_file):
    result = runner.invoke(cli, ["path", "-n", str(network_file), "4"])

    assert result.exit_code == 0, result.output
    assert "Degree: 2" in result.output
    assert "Path:   1 -> 4" in result.output
    assert "2nd degree via Alice Johnson" in result.output


def test_path_not_found(runner, network_file):
    result = runner.invoke(cli, ["path", "-n", str(network_file), "6", "--max-degree", "2"])

    assert result.exit_code == 0
    assert "No connection to 6 within 2 degrees." in result.output


def test_path_reads_network_from_env(runner, network_file):
    result = runner.invoke(
        cli, ["path", "1"], env={"CAREERNET_NETWORK_FILE": str(network_file)}
    )

    assert result.exit_code == 0, result.output
    assert "Direct connection" in result.output


def test_alumni(runner, network_file):
    result = runner.invoke(cli, ["alumni", "-n", str(network_file), "-s", "stanford"])

    assert result.exit_code == 0
    assert "Found 1 alumni" in result.output
    assert "Bob Smith - Stanford University (2016)" in result.output


def test_influencers_ranked(runner, network_file):
    result = runner.invoke(cli, ["influencers", "-n", str(network_file)])

    assert result.exit_code == 0
    lines = [line for line in result.output.splitlines() if line[:2] in ("1.", "2.")]
    assert lines[0].startswith("1. [92] Eve Adams")
    assert lines[1].startswith("2. [78] Charlie Davis")


def test_influencers_threshold_from_env(runner, network_file):
    result = runner.invoke(
        cli,
        ["influencers", "-n", str(network_file)],
        env={"CAREERNET_MIN_INFLUENCE": "80"},
    )

    assert "Found 1 influencers" in result.output


def test_stats_and_save(runner, network_file, tmp_path):
    saved = tmp_path / "graph.json"

    result = runner.invoke(cli, ["stats", "-n", str(network_file), "--save", str(saved)])

    assert result.exit_code == 0, result.output
    assert "Relationships: 2" in result.output
    assert "Degree 1: 4" in result.output
    assert "Degree 3: 1" in result.output
    assert saved.exists()


def test_malformed_network_exits(runner, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("contacts:\n  - name: No Id\n")

    result = runner.invoke(cli, ["path", "-n", str(path), "1"])

    assert result.exit_code != 0
    assert isinstance(result.exception, SystemExit)


def test_referral_timing(runner):
    result = runner.invoke(
        cli,
        [
            "referral-timing",
            "--strength",
            "5",
            "--last-contacted",
            "2026-03-07",
            "--deadline",
            "2026-03-15",
            "--job-created",
            "2026-03-05",
            "--now",
            "2026-03-10",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Send:       2026-03-11" in result.output
    assert "Follow up:  2026-03-16" in result.output
    assert "Confidence: high" in result.output


def test_follow_up(runner):
    result = runner.invoke(
        cli,
        ["follow-up", "--status", "sent", "--sent-at", "2026-03-01", "--now", "2026-03-10"],
    )

    assert result.exit_code == 0
    assert "Follow up: yes - 9 days since request" in result.output


def test_follow_up_rejects_unknown_status(runner):
    result = runner.invoke(cli, ["follow-up", "--status", "lost"])

    assert result.exit_code == 2


def test_match(runner, tmp_path):
    job_file = tmp_path / "job.yaml"
    job_file.write_text(
        "job_title: Python Developer\n"
        "job_description: Python, Django and Postgres.\n"
        "location: Remote\n"
    )
    profile_file = tmp_path / "profile.yaml"
    profile_file.write_text(
        "skills:\n"
        "  - {name: python}\n"
        "  - {name: django}\n"
        "location: Berlin\n"
    )

    result = runner.invoke(cli, ["match", str(job_file), str(profile_file)])

    assert result.exit_code == 0, result.output
    assert "Skills:     50" in result.output
    assert "Location:   100" in result.output
    assert "Recommendations:" in result.output


def test_match_accepts_plain_skills_and_numeric_location(runner, tmp_path):
    job_file = tmp_path / "job.yaml"
    job_file.write_text(
        "job_title: Python Developer\n"
        "job_description: Python, Django and Postgres.\n"
        "location: 10001\n"
    )
    profile_file = tmp_path / "profile.yaml"
    profile_file.write_text("skills:\n  - python\n  - django\nlocation: 10001\n")

    result = runner.invoke(cli, ["match", str(job_file), str(profile_file)])

    assert result.exit_code == 0, result.output
    assert "Skills:     50" in result.output
    assert "Location:   100" in result.output


def test_match_malformed_profile_exits(runner, tmp_path):
    job_file = tmp_path / "job.yaml"
    job_file.write_text("job_title: Python Developer\n")
    profile_file = tmp_path / "profile.yaml"
    profile_file.write_text("education:\n  - BS Computer Science\n")

    result = runner.invoke(cli, ["match", str(job_file), str(profile_file)])

    assert result.exit_code != 0
    assert isinstance(result.exception, SystemExit)
    assert "'education' entry must be a mapping" in result.output
