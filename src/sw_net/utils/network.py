import logging

from sw_net.networks import get_network
from sw_net.utils.validation import validate_config

log = logging.getLogger(__name__)


def build_network_from_config(config: dict):
    validate_config(config)
    network_cfg = config["network"]
    params = dict(network_cfg.get("params", {}))
    # A run-level seed is used for seeded networks that do not set their own.
    run_seed = config.get("run", {}).get("seed")
    if run_seed is not None and network_cfg["name"] == "watts_strogatz" and params.get("seed") is None:
        params["seed"] = int(run_seed)
    build_net, p_net = get_network(network_cfg["name"], params)
    A = build_net(p_net)
    log.info("Built network '%s' with %d vertices and %d stored edges", network_cfg["name"], A.shape[0], A.nnz)
    return A


def is_undirected_config(config: dict) -> bool:
    network_cfg = config["network"]
    params = network_cfg.get("params", {})
    default = network_cfg["name"] == "watts_strogatz"
    return bool(params.get("undirected", default))
