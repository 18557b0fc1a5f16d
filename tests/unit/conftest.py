from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from kubernetes import client

from bluecanary.deployment.api_client import DeploymentApiClient
from bluecanary.deployment.template_loader import DeploymentTemplateLoader
from bluecanary.service.model import SentimentModel


@pytest.fixture
def basic_templates():
    """Create basic template configuration."""
    return {
        "fastapi-app": {
            "image_repository": "heyitsrj/mlops-fastapi-app",
            "replicas": 2,
            "template": {
                "metadata": {"labels": {}},
                "spec": {
                    "containers": [
                        {
                            "name": "fastapi-app-container",
                            "imagePullPolicy": "Always",
                            "ports": [{"containerPort": 8080}],
                            "resources": {
                                "requests": {"memory": "70Mi", "cpu": "50m"},
                                "limits": {"memory": "128Mi", "cpu": "70m"},
                            },
                        }
                    ]
                },
            },
        }
    }


@pytest.fixture
def template_loader(basic_templates):
    """Create template loader instance."""
    return DeploymentTemplateLoader(templates=basic_templates, default_namespace="mlops")


@pytest.fixture
def mock_api_client():
    """Create mock K8S ApiClient."""
    return MagicMock(spec=client.ApiClient)


@pytest.fixture
def deployment_api_client(mock_api_client):
    """Create DeploymentApiClient instance."""
    return DeploymentApiClient(api_client=mock_api_client, namespace="mlops", qps=50.0)


@pytest.fixture(scope="session")
def sentiment_model() -> SentimentModel:
    return SentimentModel.default()


@pytest.fixture
def service_client(sentiment_model):
    """TestClient for the prediction service with the bundled model preloaded."""
    from bluecanary.service.server import app

    app.state.model = sentiment_model
    with TestClient(app) as test_client:
        yield test_client
