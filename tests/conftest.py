import pytest
import torch

from blobgen.utils.seed import make_generator, set_seed


@pytest.fixture(autouse=True)
def set_global_seed(request):
    # Derive a unique, stable seed per test nodeid
    base = 1337
    sid = abs(hash(request.node.nodeid)) % (2**31)
    seed = (base + sid) % (2**31 - 1)
    set_seed(seed, deterministic=True)
    yield


@pytest.fixture()
def generator():
    def _make(seed: int = 0) -> torch.Generator:
        return make_generator(seed)

    return _make


@pytest.fixture()
def two_centroids() -> torch.Tensor:
    return torch.tensor([[0.0, 0.0], [10.0, 10.0]], dtype=torch.float64)


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: longer-running statistical tests"
    )
