"""Shared fixtures: the myns namespace with functions foo and bar."""

import pytest
from kubefn.client.static import StaticFunctionClient
from kubefn.contracts.function import (
    Container,
    EnvVar,
    Function,
    FunctionList,
    FunctionSpec,
    ObjectMeta,
    PodSpec,
    PodTemplateSpec,
    ResourceRequirements,
)
from kubefn.contracts.quantity import Quantity


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep real user/project config and KUBEFN_* variables out of tests."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in ("API_SERVER", "API_PATH", "NAMESPACE", "OUTPUT", "TIMEOUT"):
        monkeypatch.delenv(f"KUBEFN_{key}", raising=False)
    return home, work


@pytest.fixture
def foo_function():
    """Function without env or resources."""
    return Function(
        metadata=ObjectMeta(name="foo", namespace="myns"),
        spec=FunctionSpec(
            handler="fhandler",
            function="ffunction",
            runtime="fruntime",
            type="ftype",
            topic="ftopic",
            deps="fdeps",
            template=PodTemplateSpec(spec=PodSpec(containers=[Container()])),
        ),
    )


@pytest.fixture
def bar_function():
    """Function with two env vars and 128Mi memory limit and request."""
    memory = Quantity.parse("128Mi")
    return Function(
        metadata=ObjectMeta(name="bar", namespace="myns", labels={"foo": "bar"}),
        spec=FunctionSpec(
            handler="bhandler",
            function="bfunction",
            runtime="bruntime",
            type="btype",
            topic="btopic",
            deps="bdeps",
            template=PodTemplateSpec(spec=PodSpec(containers=[
                Container(
                    env=[EnvVar(name="foo", value="bar"), EnvVar(name="foo2", value="bar2")],
                    resources=ResourceRequirements(
                        limits={"memory": memory},
                        requests={"memory": memory},
                    ),
                )
            ])),
        ),
    )


@pytest.fixture
def function_list(foo_function, bar_function):
    return FunctionList(items=[foo_function, bar_function])


@pytest.fixture
def static_client(function_list):
    return StaticFunctionClient(function_list)
