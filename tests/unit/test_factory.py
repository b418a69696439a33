import logging

import pytest
import torch

from blobgen.core.config import BlobsConfig, DistributionConfig
from blobgen.core.factory import build_blobs, build_distribution
from blobgen.distributions import Laplace, StandardNormal
from blobgen.generate import generate_blobs
from tests.helpers.asserts import assert_bitwise_equal


def test_build_distribution_default():
    assert isinstance(build_distribution(DistributionConfig()), StandardNormal)


def test_build_distribution_with_params():
    dist = build_distribution(DistributionConfig(name="laplace", params={"loc": 1.0, "scale": 0.5}))
    assert isinstance(dist, Laplace)
    assert (dist.loc, dist.scale) == (1.0, 0.5)


def test_build_distribution_unknown_name():
    with pytest.raises(KeyError):
        build_distribution(DistributionConfig(name="gamma"))


def test_build_distribution_bad_params():
    with pytest.raises(ValueError) as e:
        build_distribution(DistributionConfig(name="normal", params={"sigma": 2.0}))
    assert "distribution.params" in str(e.value)


def test_build_blobs_uses_seed(generator):
    cfg = BlobsConfig(blob_size=4, centroids=[[0.0, 0.0], [5.0, 5.0]], seed=21)
    data, labels = build_blobs(cfg)
    expected = generate_blobs(4, torch.tensor(cfg.centroids, dtype=torch.float64), generator(21))
    assert_bitwise_equal(data, expected)
    assert labels.tolist() == [0] * 4 + [1] * 4


def test_build_blobs_prefers_explicit_generator(generator):
    cfg = BlobsConfig(blob_size=3, centroids=[[1.0]], seed=0)
    data, _ = build_blobs(cfg, generator(99))
    again, _ = build_blobs(cfg, generator(99))
    default, _ = build_blobs(cfg)
    assert_bitwise_equal(data, again)
    assert not torch.equal(data, default)


def test_build_blobs_empty_centroids():
    data, labels = build_blobs(BlobsConfig(blob_size=3, centroids=[], n_features=5))
    assert data.shape == (0, 5)
    assert labels.shape == (0,)


def test_build_blobs_dtype_warns(caplog):
    cfg = BlobsConfig(blob_size=2, centroids=[[0.0, 0.0]], dtype="float32")
    with caplog.at_level(logging.WARNING, logger="blobgen.core.factory"):
        data, _ = build_blobs(cfg)
    assert data.dtype == torch.float32
    assert any("float32" in rec.getMessage() for rec in caplog.records)


def test_build_blobs_validates():
    with pytest.raises(ValueError):
        build_blobs(BlobsConfig(blob_size=-1))
