import io

from addchain.cli import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    EXIT_USAGE_ERROR,
    _run,
    main,
)
from addchain.meta import Properties


def release_properties(**overrides):
    fields = dict(
        name="demo",
        full_name="demo/demo",
        description="Demo project",
        build_version="1.2.3",
        release_version="1.2.3",
        release_date="2020-01-02",
        concept_doi="10.0/concept",
        doi="10.0/doi",
        author="Someone",
        license_name="MIT",
    )
    fields.update(overrides)
    return Properties(**fields)


def run(argv, properties):
    out, err = io.StringIO(), io.StringIO()
    status = _run(argv, properties, out, err)
    return status, out.getvalue(), err.getvalue()


def test_main_cite_non_release_fails(capsys):
    assert main(["cite"]) == EXIT_FAILURE
    captured = capsys.readouterr()
    assert "cannot cite non-release version" in captured.err
    assert captured.out == ""


def test_main_version_absent_without_build_version():
    assert main(["version"]) == EXIT_USAGE_ERROR


def test_cite_release():
    props = release_properties()
    status, out, err = run(["cite"], props)
    assert status == EXIT_SUCCESS
    assert out == props.citation()
    assert out.startswith("@misc{demo,\n")
    assert err == ""


def test_cite_bad_release_date():
    props = release_properties(release_date="not a date")
    status, out, err = run(["cite"], props)
    assert status == EXIT_FAILURE
    assert "release date" in err


def test_version():
    status, out, _ = run(["version"], release_properties())
    assert status == EXIT_SUCCESS
    assert out.startswith("addchain version 1.2.3 ")


def test_no_arguments_is_usage_error():
    status, out, err = run([], release_properties())
    assert status == EXIT_USAGE_ERROR
    assert "Usage:" in err


def test_unknown_command():
    status, _, _ = run(["bogus"], release_properties())
    assert status == EXIT_USAGE_ERROR


def test_help_lists_commands():
    status, out, _ = run(["help"], release_properties())
    assert status == EXIT_SUCCESS
    assert "output addchain citation" in out
    assert "print addchain version" in out


def test_help_for_command():
    status, out, _ = run(["help", "cite"], release_properties())
    assert status == EXIT_SUCCESS
    assert out.startswith("Usage: cite")


def test_help_for_unknown_command():
    status, _, err = run(["help", "nothing"], release_properties())
    assert status == EXIT_USAGE_ERROR
    assert "nothing" in err