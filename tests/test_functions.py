import os

import pytest

from lexpath.core.functions import (
    abspath,
    basename,
    dirname,
    exists,
    isabs,
    isdir,
    isfile,
    islink,
    join,
    normpath,
    split,
    splitext,
)
from lexpath.core.separator import WINDOWS


def test_join():
    assert join(["/abc/"]) == "/abc/"
    assert join(["/abc", "xyz"]) == "/abc/xyz"
    assert join(["/abc", "", "xyz"]) == "/abc/xyz"
    assert join(["abc/", "xyz/"]) == "abc/xyz/"
    assert join(["/abc/", "/xyz/"]) == "/xyz/"
    assert join(["/abc//", "xyz", ""]) == "/abc//xyz/"
    assert join([""]) == ""
    assert join([]) == ""


def test_join_generator():
    assert join(part for part in ("abc", "def")) == "abc/def"


def test_split():
    assert split("//abc") == ("//", "abc")
    assert split("/abc/xyz") == ("/abc", "xyz")
    assert split("abc//xyz") == ("abc", "xyz")
    assert split("abc") == ("", "abc")
    assert split("abc/") == ("abc", "")
    assert split("/") == ("/", "")
    assert split("") == ("", "")


def test_dirname():
    assert dirname("//abc") == "//"
    assert dirname("/abc/xyz") == "/abc"
    assert dirname("abc//xyz") == "abc"
    assert dirname("abc") == ""
    assert dirname("abc/") == "abc"
    assert dirname("") == ""


def test_basename():
    assert basename("//abc") == "abc"
    assert basename("/abc/xyz") == "xyz"
    assert basename("abc//xyz") == "xyz"
    assert basename("abc") == "abc"
    assert basename("abc/") == ""
    assert basename("") == ""


def test_normpath():
    assert normpath("") == "."
    assert normpath("./.") == "."
    assert normpath("abc") == "abc"
    assert normpath("abc/") == "abc"
    assert normpath("abc/../") == "."
    assert normpath("abc/../../..") == "../.."
    assert normpath("/") == "/"
    assert normpath("/.") == "/"
    assert normpath("/abc") == "/abc"
    assert normpath("/abc/../../") == "/"
    assert normpath("/abc/.././xyz/") == "/xyz"


def test_abspath():
    cwd = os.getcwd()

    assert abspath("") == cwd
    assert abspath(".") == cwd
    assert abspath("/") == "/"
    assert abspath("/abc") == "/abc"
    assert abspath("abc/xyz/") == cwd + "/abc/xyz"
    assert abspath("abc/../") == cwd


def test_isabs():
    assert not isabs("")
    assert not isabs("abc")
    assert isabs("/")
    assert isabs("/abc")


def test_splitext():
    assert splitext("") == ("", "")
    assert splitext(".") == (".", "")
    assert splitext(".abc") == (".abc", "")
    assert splitext("abc.") == ("abc", ".")
    assert splitext("abc.xyz") == ("abc", ".xyz")
    assert splitext("abc..xyz") == ("abc.", ".xyz")
    assert splitext("abc.def.xyz") == ("abc.def", ".xyz")


def test_other_separator():
    assert join(["C:", "abc"], WINDOWS) == "C:\\abc"
    assert split("\\abc\\xyz", WINDOWS) == ("\\abc", "xyz")
    assert normpath("abc\\..\\xyz", WINDOWS) == "xyz"
    assert isabs("\\abc", WINDOWS)
    assert not isabs("/abc", WINDOWS)


def test_exists():
    assert exists(__file__)
    assert not exists("")


def test_isfile():
    assert isfile(__file__)
    assert not isfile("")
    assert not isfile("/")


def test_isdir():
    assert isdir("/")
    assert not isdir("")
    assert not isdir(__file__)


def test_islink(workdir):
    link = join([str(workdir), "test_islink"])
    os.symlink(__file__, link)

    assert islink(link)
    assert not islink("/")
    assert not islink(__file__)
    assert not islink("")


@pytest.mark.parametrize("function", [exists, isfile, isdir, islink])
def test_probes_missing_path(workdir, function):
    assert not function(join([str(workdir), "missing", "file"]))
