import pytest

from blobgen.distributions import Distribution, DistributionRegistry, StandardNormal, Uniform


def test_register_build_and_names():
    r = DistributionRegistry()
    r.register("uniform", Uniform)
    assert "uniform" in r
    assert len(r) == 1
    assert r.names() == ["uniform"]
    dist = r.build("uniform", {"low": 0.0, "high": 3.0})
    assert isinstance(dist, Uniform)
    assert (dist.low, dist.high) == (0.0, 3.0)


def test_build_without_params_uses_defaults():
    r = DistributionRegistry()
    r.register("standard-normal", StandardNormal)
    assert isinstance(r.build("standard-normal", None), StandardNormal)


def test_duplicate_name_requires_replace():
    r = DistributionRegistry()
    r.register("noise", StandardNormal)
    with pytest.raises(KeyError):
        r.register("noise", Uniform)
    r.register("noise", Uniform, replace=True)
    assert isinstance(r.build("noise"), Uniform)


def test_unknown_name_lists_known_names():
    r = DistributionRegistry()
    r.register("standard-normal", StandardNormal)
    with pytest.raises(KeyError) as e:
        r.build("gamma")
    assert "standard-normal" in str(e.value)


def test_rejected_params_become_value_error():
    r = DistributionRegistry()
    r.register("uniform", Uniform)
    with pytest.raises(ValueError) as e:
        r.build("uniform", {"width": 2.0})
    assert "distribution.params" in str(e.value)


def test_factory_must_return_distribution():
    r = DistributionRegistry()
    r.register("broken", lambda: object())
    with pytest.raises(TypeError):
        r.build("broken")


def test_factory_functions_are_accepted():
    def wide_uniform(width: float = 10.0) -> Distribution:
        return Uniform(-width / 2, width / 2)

    r = DistributionRegistry()
    r.register("wide-uniform", wide_uniform)
    dist = r.build("wide-uniform", {"width": 4.0})
    assert (dist.low, dist.high) == (-2.0, 2.0)


@pytest.mark.parametrize(
    "bad", ["Normal", "standard normal", "standard_normal", "", "-normal", "normal-", "2d", None]
)
def test_bad_names_rejected(bad):
    r = DistributionRegistry()
    with pytest.raises(ValueError):
        r.register(bad, StandardNormal)


def test_non_callable_factory_rejected():
    r = DistributionRegistry()
    with pytest.raises(TypeError):
        r.register("noise", 3)
