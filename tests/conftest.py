import pytest

from lexpath.core.path import Path
from lexpath.core.pure import PureBasePath
from lexpath.tempdir import TemporaryDirectory


@pytest.fixture(params=[PureBasePath, Path], ids=["pure", "path"])
def path_type(request):
    return request.param


@pytest.fixture
def workdir():
    with TemporaryDirectory(prefix="lexpath") as name:
        yield Path(name)
