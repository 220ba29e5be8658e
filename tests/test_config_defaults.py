from findkit.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.logging.trace == "discard"
    assert cfg.logging.info == "stdout"
    assert cfg.logging.debug == "stdout"
    assert cfg.logging.warning == "stdout"
    assert cfg.logging.error == "stderr"
    assert cfg.random.seed is None
    assert cfg.random.seed_env == "FINDKIT_RANDOM_SEED"
    assert cfg.codec.level == 9
    assert cfg.network.prefix == "192.168"
