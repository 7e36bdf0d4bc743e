import pytest

from dock2kube.core.config import GeneratorConfig


@pytest.fixture
def config(tmp_path):
    """Default constants with output redirected into the test's tmp dir."""
    return GeneratorConfig(output_root=str(tmp_path / "envs"))


@pytest.fixture
def fixed_name():
    return lambda: "svc-fixedname0"
