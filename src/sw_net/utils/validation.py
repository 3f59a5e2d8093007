from sw_net.networks import get_network


def validate_config(config: dict) -> None:
    if "network" not in config:
        raise ValueError("Missing required top-level key: 'network'")

    network_cfg = config["network"]
    if "name" not in network_cfg:
        raise ValueError("Missing network name in config['network']")
    get_network(network_cfg["name"], network_cfg.get("params", {}))

    run_cfg = config.get("run", {})
    extra = set(run_cfg) - {"seed"}
    if extra:
        raise ValueError(f"Unknown run parameters: {sorted(extra)}")
