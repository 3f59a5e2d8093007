"""Tests for config validation and building networks from config."""

import pytest
from pydantic import ValidationError

from sw_net.utils.graph_checks import is_symmetric, summarize
from sw_net.utils.network import build_network_from_config, is_undirected_config
from sw_net.utils.validation import validate_config


def _ws_config(seed: int | None = None) -> dict:
    config = {"network": {"name": "watts_strogatz", "params": {"n": 40, "k": 4, "p": 0.2}}}
    if seed is not None:
        config["run"] = {"seed": seed}
    return config


class TestValidateConfig:
    """Config errors surface before any graph is built."""

    def test_valid_config(self) -> None:
        validate_config(_ws_config(seed=1))

    def test_missing_network(self) -> None:
        with pytest.raises(ValueError, match="network"):
            validate_config({"run": {"seed": 1}})

    def test_missing_name(self) -> None:
        with pytest.raises(ValueError, match="network name"):
            validate_config({"network": {"params": {"n": 5}}})

    def test_bad_params(self) -> None:
        with pytest.raises(ValidationError):
            validate_config({"network": {"name": "ring_lattice", "params": {"n": 0}}})

    def test_unknown_run_key(self) -> None:
        config = _ws_config(seed=1)
        config["run"]["steps"] = 10
        with pytest.raises(ValueError, match="Unknown run parameters"):
            validate_config(config)


class TestBuildFromConfig:
    """Run seeds make config-built networks reproducible."""

    def test_run_seed_reproducible(self) -> None:
        A = build_network_from_config(_ws_config(seed=5))
        B = build_network_from_config(_ws_config(seed=5))
        assert (A != B).nnz == 0
        assert is_symmetric(A)

    def test_network_seed_takes_precedence(self) -> None:
        config = _ws_config(seed=5)
        config["network"]["params"]["seed"] = 6
        A = build_network_from_config(config)
        B = build_network_from_config({"network": {"name": "watts_strogatz", "params": {"n": 40, "k": 4, "p": 0.2, "seed": 6}}})
        assert (A != B).nnz == 0

    def test_ring_lattice_ignores_run_seed(self) -> None:
        A = build_network_from_config(
            {"network": {"name": "ring_lattice", "params": {"n": 6, "k": 2}}, "run": {"seed": 3}}
        )
        assert A.nnz == 12

    def test_undirected_detection(self) -> None:
        assert is_undirected_config(_ws_config())
        assert not is_undirected_config({"network": {"name": "ring_lattice", "params": {"n": 6}}})
        assert is_undirected_config(
            {"network": {"name": "ring_lattice", "params": {"n": 6, "undirected": True}}}
        )


class TestSummary:
    """Summaries report the structural properties of a graph."""

    def test_lattice_summary(self) -> None:
        A = build_network_from_config({"network": {"name": "ring_lattice", "params": {"n": 6, "k": 2}}})
        s = summarize(A)
        assert s["n"] == 6
        assert s["edges"] == 12
        assert s["total_weight"] == 12.0
        assert s["symmetric"] is False
        assert s["self_loops"] == 0
        assert s["multi_edges"] == 0
        assert s["mean_degree"] == 2.0
