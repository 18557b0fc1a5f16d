"""Constants for Deployment manifests and blue/green labels."""


class DeploymentConstants:
    """Constants for Kubernetes Deployment manifests."""

    API_VERSION = "apps/v1"
    KIND = "Deployment"

    # Label key shared by selector, pod template and Service selector
    LABEL_APP = "app"

    # Deployments are named "<color>-deploy", e.g. blue-deploy
    NAME_SUFFIX = "-deploy"

    COLOR_BLUE = "blue"
    COLOR_GREEN = "green"

    DEFAULT_IMAGE_PULL_POLICY = "Always"

    @classmethod
    def deployment_name(cls, color: str) -> str:
        return f"{color}{cls.NAME_SUFFIX}"
