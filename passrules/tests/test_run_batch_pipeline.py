import pytest
import yaml

from passrules.pipelines.batch_generate import SUCCESS_FILE
from passrules.pipelines.run_batch_pipeline import main, rule_from_action, run_pipeline
from passrules.utils.exceptions import ValidationError


@pytest.fixture
def job(corpus, tmp_path):
    return {
        "input": str(corpus),
        "output_root": str(tmp_path / "runs"),
        "min_length": 2,
        "max_length": 4,
        "workers": 1,
        "rules": [
            {
                "charset": "ascii",
                "replacement": "none",
                "word": "every",
                "positions": "1st",
                "is_execute": True,
            },
            {
                "charset": "lowercase-letters",
                "replacement": "none",
                "word": "every2nd",
                "positions": "1st+2nd",
                "add_spaces": True,
                "is_execute": False,
            },
        ],
    }


def test_executed_rules_get_their_own_directory(job, tmp_path):
    assert run_pipeline(job) == 0

    runs = tmp_path / "runs"
    executed = runs / "ascii_none_every_1st_false"
    assert (executed / SUCCESS_FILE).exists()
    assert (executed / "length-2-m-00000").read_text(encoding="utf-8") == "HW\nCD\n"
    assert [p.name for p in runs.iterdir()] == [executed.name]


def test_main_reads_yaml(job, tmp_path):
    path = tmp_path / "job.yaml"
    path.write_text(yaml.safe_dump(job), encoding="utf-8")

    assert main([str(path)]) == 0
    assert (tmp_path / "runs" / "ascii_none_every_1st_false" / SUCCESS_FILE).exists()


def test_rule_from_action_defaults_spaces_off():
    rule = rule_from_action(
        {"charset": "ascii", "replacement": "none", "word": "every", "positions": "1st"}
    )
    assert rule.add_spaces is False


@pytest.mark.parametrize("value, expected", [(True, True), ("TRUE", True), (1, False)])
def test_rule_from_action_spaces_flag_from_yaml(value, expected):
    action = yaml.safe_load(
        "charset: ascii\nreplacement: none\nword: every\npositions: 1st\n"
        f"add_spaces: {value}\n"
    )
    assert rule_from_action(action).add_spaces is expected


# -------------------------------------
# ❌ Invalid jobs
# -------------------------------------
def test_incomplete_rule_is_rejected():
    with pytest.raises(ValidationError):
        rule_from_action({"charset": "ascii", "replacement": "none"})


def test_invalid_rule_stops_before_any_job(job, tmp_path):
    job["rules"].append(
        {
            "charset": "ebcdic",
            "replacement": "none",
            "word": "every",
            "positions": "1st",
        }
    )
    path = tmp_path / "job.yaml"
    path.write_text(yaml.safe_dump(job), encoding="utf-8")

    assert main([str(path)]) == 1
    assert not (tmp_path / "runs").exists()


def test_existing_output_fails_the_pipeline(job, tmp_path):
    existing = tmp_path / "runs" / "ascii_none_every_1st_false"
    existing.mkdir(parents=True)
    (existing / "length-2-m-00000").write_text("old\n", encoding="utf-8")

    assert run_pipeline(job) == 1
