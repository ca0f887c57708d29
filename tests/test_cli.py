"""Tests for the command-line front end."""

import io

import pytest

from zero_slic.cli import ErrorKind, check_input, main


@pytest.mark.parametrize("args,expected", [
    (["4"], (4, None)),
    ([], (None, ErrorKind.WRONG_ARGUMENT_COUNT)),
    (["4", "5"], (None, ErrorKind.WRONG_ARGUMENT_COUNT)),
    (["0"], (None, ErrorKind.NON_POSITIVE_CLUSTER_COUNT)),
    (["-3"], (None, ErrorKind.NON_POSITIVE_CLUSTER_COUNT)),
    (["many"], (None, ErrorKind.NON_POSITIVE_CLUSTER_COUNT)),
    (["3abc"], (3, None)),
    (["3.7"], (3, None)),
    ([" +5"], (5, None)),
    (["0.9"], (None, ErrorKind.NON_POSITIVE_CLUSTER_COUNT)),
    (["99999999999"], (None, ErrorKind.NON_POSITIVE_CLUSTER_COUNT)),
    ([".5"], (None, ErrorKind.NON_POSITIVE_CLUSTER_COUNT)),
])
def test_check_input(args, expected):
    assert check_input(args) == expected


def test_segments_stdin():
    stdin = io.StringIO("2 2\n5 5\n5 5\n")
    stdout = io.StringIO()
    assert main(["zero-slic", "1"], stdin, stdout) == 0
    assert stdout.getvalue() == "0 0\n0 0\n"


def test_two_tone_stdin():
    rows = ["0 0 0 0 255 255 255 255"] * 4
    stdin = io.StringIO("8 4\n" + "\n".join(rows))
    stdout = io.StringIO()
    main(["zero-slic", "2"], stdin, stdout)
    assert stdout.getvalue() == "0 0 0 0 1 1 1 1\n" * 4


@pytest.mark.parametrize("argv,message", [
    (["zero-slic"], "Wrong number of arguments."),
    (["zero-slic", "0"], "Number of clusters should be positive integer."),
    (["zero-slic", "abc"], "Number of clusters should be positive integer."),
])
def test_errors_exit_cleanly(argv, message):
    stdin = io.StringIO("2 2\n1 2 3 4\n")
    stdout = io.StringIO()
    assert main(argv, stdin, stdout) == 0
    assert stdout.getvalue() == f"{message}\nUsage: zero-slic NO_CLUSTERS\n"
    # nothing was read or segmented
    assert stdin.tell() == 0
