from dataclasses import dataclass, field
from pathlib import Path

import yaml

from bluecanary import env_vars
from bluecanary.logger import init_logger

logger = init_logger(__name__)


@dataclass
class ServiceConfig:
    host: str = "0.0.0.0"
    port: int = field(default_factory=lambda: env_vars.BLUECANARY_SERVICE_PORT)
    model_path: str | None = field(default_factory=lambda: env_vars.BLUECANARY_MODEL_PATH)


@dataclass
class SmokeConfig:
    instance_ip: str = field(default_factory=lambda: env_vars.BLUECANARY_CANARY_INSTANCE_IP)
    port: int = field(default_factory=lambda: env_vars.BLUECANARY_CANARY_PORT)
    scheme: str = "http"
    timeout: float = field(default_factory=lambda: env_vars.BLUECANARY_SMOKE_TIMEOUT_SECONDS)
    load_requests: int = 100

    def __post_init__(self) -> None:
        if self.load_requests <= 0:
            raise ValueError(f"load_requests must be positive, got {self.load_requests}")

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.instance_ip}:{self.port}"


@dataclass
class KubeConfig:
    kubeconfig_path: str | None = field(default_factory=lambda: env_vars.BLUECANARY_KUBECONFIG)
    namespace: str = field(default_factory=lambda: env_vars.BLUECANARY_KUBE_NAMESPACE)
    qps: float = 5.0
    templates: dict = field(default_factory=dict)


@dataclass
class BlueCanaryConfig:
    service: ServiceConfig = field(default_factory=ServiceConfig)
    smoke: SmokeConfig = field(default_factory=SmokeConfig)
    kube: KubeConfig = field(default_factory=KubeConfig)

    @classmethod
    def from_env(cls, config_path: str | Path | None = None):
        if not config_path:
            config_path = env_vars.BLUECANARY_CONFIG

        if not config_path:
            return cls()

        config_file = Path(config_path)

        if not config_file.exists():
            raise Exception(f"config file {config_file} not found")

        with open(config_file) as f:
            config: dict = yaml.safe_load(f) or {}

        kwargs = {}
        if "service" in config:
            kwargs["service"] = ServiceConfig(**config["service"])
        if "smoke" in config:
            kwargs["smoke"] = SmokeConfig(**config["smoke"])
        if "kube" in config:
            kwargs["kube"] = KubeConfig(**config["kube"])

        return cls(**kwargs)

    @classmethod
    def default_path(cls, env: str = "local") -> Path:
        return Path(env_vars.BLUECANARY_PROJECT_ROOT) / env_vars.BLUECANARY_CONFIG_DIR_NAME / f"bluecanary-{env}.yml"

    def __post_init__(self) -> None:
        logger.debug(f"init BlueCanaryConfig: {self}")
