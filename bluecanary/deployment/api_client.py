"""K8s API client for color-sliced Deployments.

Wraps AppsV1Api and CoreV1Api with:
- Rate limiting using aiolimiter (configurable QPS)
- Blocking kubernetes calls moved off the event loop with asyncio.to_thread
- Create-or-replace apply semantics for Deployment manifests
- Service selector patching for blue/green cut-over
"""

import asyncio
from dataclasses import dataclass
from typing import Any

from aiolimiter import AsyncLimiter
from kubernetes import client, config
from kubernetes.client.rest import ApiException

from bluecanary.deployment.constants import DeploymentConstants
from bluecanary.logger import init_logger

logger = init_logger(__name__)


@dataclass
class RolloutStatus:
    deployment: str
    namespace: str
    desired_replicas: int
    ready_replicas: int
    updated_replicas: int

    @property
    def is_complete(self) -> bool:
        return self.ready_replicas == self.desired_replicas and self.updated_replicas == self.desired_replicas


class DeploymentApiClient:
    """Deployment and Service operations against one namespace."""

    def __init__(
        self,
        api_client: client.ApiClient,
        namespace: str,
        qps: float = 5.0,
    ):
        """Initialize the client.

        Args:
            api_client: Kubernetes ApiClient instance
            namespace: Namespace for operations
            qps: Queries per second limit (default: 5 for small clusters)
        """
        self._api_client = api_client
        self._namespace = namespace
        self._apps_api = client.AppsV1Api(api_client)
        self._core_api = client.CoreV1Api(api_client)
        self._rate_limiter = AsyncLimiter(max_rate=qps, time_period=1.0)

    @classmethod
    def from_kubeconfig(cls, kubeconfig_path: str | None, namespace: str, qps: float = 5.0) -> "DeploymentApiClient":
        """Build a client from a kubeconfig file, falling back to in-cluster config."""
        if kubeconfig_path:
            api_client = config.new_client_from_config(config_file=kubeconfig_path)
        else:
            try:
                config.load_incluster_config()
            except config.ConfigException:
                config.load_kube_config()
            api_client = client.ApiClient()
        logger.info(f"Kubernetes client initialized for namespace: {namespace}")
        return cls(api_client=api_client, namespace=namespace, qps=qps)

    @property
    def namespace(self) -> str:
        return self._namespace

    def _to_dict(self, obj: Any) -> dict[str, Any]:
        if isinstance(obj, dict):
            return obj
        return self._api_client.sanitize_for_serialization(obj)

    async def get_deployment(self, name: str) -> dict[str, Any]:
        async with self._rate_limiter:
            deployment = await asyncio.to_thread(
                self._apps_api.read_namespaced_deployment,
                name=name,
                namespace=self._namespace,
            )
        return self._to_dict(deployment)

    async def apply_deployment(self, body: dict[str, Any]) -> dict[str, Any]:
        """Create the Deployment, or replace it when it already exists.

        Args:
            body: Deployment manifest

        Returns:
            Created or replaced Deployment
        """
        name = body["metadata"]["name"]
        try:
            await self.get_deployment(name)
        except ApiException as e:
            if e.status != 404:
                raise
            async with self._rate_limiter:
                created = await asyncio.to_thread(
                    self._apps_api.create_namespaced_deployment,
                    namespace=self._namespace,
                    body=body,
                )
            logger.info(f"Created Deployment {name} in {self._namespace}")
            return self._to_dict(created)

        async with self._rate_limiter:
            replaced = await asyncio.to_thread(
                self._apps_api.replace_namespaced_deployment,
                name=name,
                namespace=self._namespace,
                body=body,
            )
        logger.info(f"Replaced Deployment {name} in {self._namespace}")
        return self._to_dict(replaced)

    async def delete_deployment(self, name: str) -> dict[str, Any]:
        async with self._rate_limiter:
            status = await asyncio.to_thread(
                self._apps_api.delete_namespaced_deployment,
                name=name,
                namespace=self._namespace,
            )
        logger.info(f"Deleted Deployment {name} in {self._namespace}")
        return self._to_dict(status)

    async def rollout_status(self, name: str) -> RolloutStatus:
        deployment = await self.get_deployment(name)
        spec = deployment.get("spec") or {}
        status = deployment.get("status") or {}
        return RolloutStatus(
            deployment=name,
            namespace=self._namespace,
            desired_replicas=spec.get("replicas") or 0,
            ready_replicas=status.get("readyReplicas") or 0,
            updated_replicas=status.get("updatedReplicas") or 0,
        )

    async def switch_service(self, service_name: str, color: str) -> dict[str, Any]:
        """Point a Service at the ``<color>-deploy`` pods."""
        target = DeploymentConstants.deployment_name(color)
        body = {"spec": {"selector": {DeploymentConstants.LABEL_APP: target}}}
        async with self._rate_limiter:
            service = await asyncio.to_thread(
                self._core_api.patch_namespaced_service,
                name=service_name,
                namespace=self._namespace,
                body=body,
            )
        logger.info(f"Switched Service {service_name} in {self._namespace} to {target}")
        return self._to_dict(service)
