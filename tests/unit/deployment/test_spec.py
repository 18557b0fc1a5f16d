"""Unit tests for DeploymentSpec."""

import copy

import pytest
import yaml

from bluecanary.common.exceptions import InvalidManifestError
from bluecanary.deployment.spec import DeploymentSpec, dump_manifest, load_manifest, retag_image


@pytest.fixture
def blue_document(blue_manifest_path):
    with blue_manifest_path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


@pytest.fixture
def blue_spec(blue_manifest_path) -> DeploymentSpec:
    return load_manifest(blue_manifest_path)


class TestFromManifest:
    def test_reads_blue_manifest(self, blue_spec):
        assert blue_spec.name == "blue-deploy"
        assert blue_spec.namespace == "mlops"
        assert blue_spec.replicas == 2
        assert blue_spec.selector_labels == {"app": "blue-deploy"}
        assert blue_spec.template_labels == {"app": "blue-deploy"}

        container = blue_spec.containers[0]
        assert container.name == "fastapi-app-container"
        assert container.image == "heyitsrj/mlops-fastapi-app:blue"
        assert container.image_pull_policy == "Always"
        assert container.ports == [8080]
        assert container.resources.requests.memory == "70Mi"
        assert container.resources.requests.cpu == "50m"
        assert container.resources.limits.memory == "128Mi"
        assert container.resources.limits.cpu == "70m"

    def test_round_trip_reproduces_document(self, blue_spec, blue_document):
        assert blue_spec.to_manifest() == blue_document

    def test_dump_manifest_writes_yaml(self, blue_spec, blue_document, tmp_path):
        target = tmp_path / "out.yaml"
        text = dump_manifest(blue_spec, target)

        assert yaml.safe_load(text) == blue_document
        assert yaml.safe_load(target.read_text()) == blue_document
        assert text.startswith("apiVersion: apps/v1")

    def test_rejects_wrong_kind(self, blue_document):
        blue_document["kind"] = "StatefulSet"
        with pytest.raises(InvalidManifestError, match="unsupported kind"):
            DeploymentSpec.from_manifest(blue_document)

    def test_rejects_wrong_api_version(self, blue_document):
        blue_document["apiVersion"] = "extensions/v1beta1"
        with pytest.raises(InvalidManifestError, match="unsupported apiVersion"):
            DeploymentSpec.from_manifest(blue_document)

    def test_rejects_missing_name(self, blue_document):
        del blue_document["metadata"]["name"]
        with pytest.raises(InvalidManifestError, match="malformed"):
            DeploymentSpec.from_manifest(blue_document)

    def test_rejects_port_without_container_port(self, blue_document):
        blue_document["spec"]["template"]["spec"]["containers"][0]["ports"] = [{"port": 8080}]
        with pytest.raises(InvalidManifestError):
            DeploymentSpec.from_manifest(blue_document)

    @pytest.mark.parametrize(
        "path, value",
        [
            (("spec", "template", "spec", "containers"), ["oops"]),
            (("metadata",), ["name", "blue-deploy"]),
            (("spec",), "replicas: 2"),
            (("spec", "template"), [1, 2]),
            (("spec", "template", "spec", "containers", 0, "resources"), "70Mi"),
        ],
    )
    def test_rejects_wrongly_shaped_nodes(self, blue_document, path, value):
        node = blue_document
        for key in path[:-1]:
            node = node[key]
        node[path[-1]] = value

        with pytest.raises(InvalidManifestError, match="malformed"):
            DeploymentSpec.from_manifest(blue_document)

    def test_rejects_non_mapping(self):
        with pytest.raises(InvalidManifestError, match="mapping"):
            DeploymentSpec.from_manifest(["not", "a", "manifest"])

    def test_numeric_quantities_are_stringified(self, blue_document):
        blue_document["spec"]["template"]["spec"]["containers"][0]["resources"]["limits"]["cpu"] = 1
        spec = DeploymentSpec.from_manifest(blue_document)
        assert spec.containers[0].resources.limits.cpu == "1"


class TestInvariants:
    def test_blue_manifest_is_valid(self, blue_spec):
        assert blue_spec.problems() == []
        assert blue_spec.ensure_valid() is blue_spec

    def test_selector_must_match_template_labels(self, blue_document):
        blue_document["spec"]["selector"]["matchLabels"] = {"app": "green-deploy"}
        spec = DeploymentSpec.from_manifest(blue_document)

        problems = spec.problems()
        assert len(problems) == 1
        assert "do not match template labels" in problems[0]
        with pytest.raises(InvalidManifestError, match="invalid Deployment blue-deploy"):
            spec.ensure_valid()

    def test_requests_must_not_exceed_limits(self, blue_document):
        resources = blue_document["spec"]["template"]["spec"]["containers"][0]["resources"]
        resources["requests"]["cpu"] = "100m"
        resources["requests"]["memory"] = "256Mi"
        spec = DeploymentSpec.from_manifest(blue_document)

        problems = spec.problems()
        assert any("cpu request 100m exceeds limit 70m" in p for p in problems)
        assert any("memory request 256Mi exceeds limit 128Mi" in p for p in problems)

    def test_unparsable_quantity_is_reported(self, blue_document):
        blue_document["spec"]["template"]["spec"]["containers"][0]["resources"]["limits"]["memory"] = "lots"
        spec = DeploymentSpec.from_manifest(blue_document)

        assert any("Invalid memory quantity format" in p for p in spec.problems())

    def test_requests_without_limits_are_accepted(self, blue_document):
        del blue_document["spec"]["template"]["spec"]["containers"][0]["resources"]["limits"]
        spec = DeploymentSpec.from_manifest(blue_document)

        assert spec.problems() == []
        assert "limits" not in spec.to_manifest()["spec"]["template"]["spec"]["containers"][0]["resources"]

    def test_needs_a_container_and_non_negative_replicas(self, blue_document):
        blue_document["spec"]["replicas"] = -1
        blue_document["spec"]["template"]["spec"]["containers"] = []
        spec = DeploymentSpec.from_manifest(blue_document)

        problems = spec.problems()
        assert "replicas must be >= 0, got -1" in problems
        assert "at least one container is required" in problems


class TestColor:
    def test_color_from_name(self, blue_spec):
        assert blue_spec.color == "blue"

    def test_color_is_none_for_other_names(self, blue_spec):
        assert blue_spec.model_copy(update={"name": "web"}).color is None

    def test_with_color_retargets_slice(self, blue_spec):
        green = blue_spec.with_color("green")

        assert green.name == "green-deploy"
        assert green.namespace == "mlops"
        assert green.replicas == 2
        assert green.selector_labels == {"app": "green-deploy"}
        assert green.template_labels == {"app": "green-deploy"}
        assert green.containers[0].image == "heyitsrj/mlops-fastapi-app:green"
        assert green.containers[0].resources == blue_spec.containers[0].resources
        assert green.problems() == []

    def test_with_color_leaves_original_untouched(self, blue_spec):
        before = copy.deepcopy(blue_spec.to_manifest())
        blue_spec.with_color("green")
        assert blue_spec.to_manifest() == before

    def test_with_color_matches_shipped_green_manifest(self, blue_spec, project_root):
        green = load_manifest(project_root / "kubernetes" / "deployment-green.yaml")
        assert blue_spec.with_color("green") == green

    def test_with_color_rejects_empty(self, blue_spec):
        with pytest.raises(ValueError):
            blue_spec.with_color("")

    def test_spec_is_immutable(self, blue_spec):
        with pytest.raises(Exception):
            blue_spec.name = "other"


@pytest.mark.parametrize(
    "image, expected",
    [
        ("heyitsrj/mlops-fastapi-app:blue", "heyitsrj/mlops-fastapi-app:green"),
        ("heyitsrj/mlops-fastapi-app", "heyitsrj/mlops-fastapi-app:green"),
        ("registry.local:5000/app", "registry.local:5000/app:green"),
        ("registry.local:5000/app:blue", "registry.local:5000/app:green"),
        ("app@sha256:abcdef", "app:green"),
    ],
)
def test_retag_image(image, expected):
    assert retag_image(image, "green") == expected
