import os
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    BLUECANARY_LOGGING_PATH: str | None = None
    BLUECANARY_LOGGING_FILE_NAME: str | None = None
    BLUECANARY_LOGGING_LEVEL: str | None = None
    BLUECANARY_CONFIG: str | None = None
    BLUECANARY_CONFIG_DIR_NAME: str | None = None
    BLUECANARY_PROJECT_ROOT: str | None = None

    # Prediction service
    BLUECANARY_MODEL_PATH: str | None = None
    BLUECANARY_SERVICE_PORT: int = 8080

    # Smoke tests
    BLUECANARY_CANARY_INSTANCE_IP: str | None = None
    BLUECANARY_CANARY_PORT: int = 8080
    BLUECANARY_SMOKE_TIMEOUT_SECONDS: float = 5.0

    # Kubernetes
    BLUECANARY_KUBE_NAMESPACE: str = "mlops"
    BLUECANARY_KUBECONFIG: str | None = None


environment_variables: dict[str, Callable[[], Any]] = {
    "BLUECANARY_LOGGING_PATH": lambda: os.getenv("BLUECANARY_LOGGING_PATH"),
    "BLUECANARY_LOGGING_FILE_NAME": lambda: os.getenv("BLUECANARY_LOGGING_FILE_NAME", "bluecanary.log"),
    "BLUECANARY_LOGGING_LEVEL": lambda: os.getenv("BLUECANARY_LOGGING_LEVEL", "INFO"),
    "BLUECANARY_CONFIG": lambda: os.getenv("BLUECANARY_CONFIG"),
    "BLUECANARY_CONFIG_DIR_NAME": lambda: os.getenv("BLUECANARY_CONFIG_DIR_NAME", "bluecanary-conf"),
    "BLUECANARY_PROJECT_ROOT": lambda: os.getenv(
        "BLUECANARY_PROJECT_ROOT", str(Path(__file__).resolve().parents[1])
    ),
    "BLUECANARY_MODEL_PATH": lambda: os.getenv("BLUECANARY_MODEL_PATH"),
    "BLUECANARY_SERVICE_PORT": lambda: int(os.getenv("BLUECANARY_SERVICE_PORT", "8080")),
    "BLUECANARY_CANARY_INSTANCE_IP": lambda: os.getenv("BLUECANARY_CANARY_INSTANCE_IP", ""),
    "BLUECANARY_CANARY_PORT": lambda: int(os.getenv("BLUECANARY_CANARY_PORT", "8080")),
    "BLUECANARY_SMOKE_TIMEOUT_SECONDS": lambda: float(os.getenv("BLUECANARY_SMOKE_TIMEOUT_SECONDS", "5")),
    "BLUECANARY_KUBE_NAMESPACE": lambda: os.getenv("BLUECANARY_KUBE_NAMESPACE", "mlops"),
    "BLUECANARY_KUBECONFIG": lambda: os.getenv("BLUECANARY_KUBECONFIG"),
}


def __getattr__(name: str):
    if name in environment_variables:
        return environment_variables[name]()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def is_set(name: str):
    """Check if an environment variable is explicitly set."""
    if name in environment_variables:
        return name in os.environ
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
