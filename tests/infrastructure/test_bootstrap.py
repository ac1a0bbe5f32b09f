"""Tests for the composition root."""

import pytest

from application.intelligence.orchestrators import IntelligenceOrchestrator
from infrastructure import bootstrap
from infrastructure.external_apis import HttpIntegrationClient

CUSTOM_WORKFLOW = """
id: custom_weight
name: Custom weight
rules:
  - id: any_loss
    action: notify
    conditions:
      - field: weight_change
        operator: less_than
        value: 0
    outputs:
      - destination: student
        format: in_app
        template_id: weight_loss
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "REPOSITORY_BACKEND",
        "GUIDANCE_PROVIDER",
        "MARKET_PRICE_PER_LB",
        "WORKFLOW_DEFINITIONS_PATH",
        "INTEGRATION_API_URL",
        "INTEGRATION_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadConfiguredWorkflows:
    def test_bundled_defaults(self) -> None:
        ids = {w.workflow_id for w in bootstrap.load_configured_workflows()}

        assert "feed_performance_alert" in ids

    def test_custom_file(self, clean_env, tmp_path) -> None:
        path = tmp_path / "workflows.yaml"
        path.write_text(CUSTOM_WORKFLOW)
        clean_env.setenv("WORKFLOW_DEFINITIONS_PATH", str(path))

        (workflow,) = bootstrap.load_configured_workflows()

        assert workflow.workflow_id == "custom_weight"


class TestExternalApiFromEnv:
    def test_disabled_without_url(self) -> None:
        assert bootstrap._external_api_from_env() is None

    def test_http_client_when_configured(self, clean_env) -> None:
        clean_env.setenv("INTEGRATION_API_URL", "https://hooks.example.org")

        assert isinstance(bootstrap._external_api_from_env(), HttpIntegrationClient)


class TestBuildIntelligenceOrchestrator:
    @pytest.mark.asyncio
    async def test_builds_from_environment(self, clean_env) -> None:
        clean_env.setenv("MARKET_PRICE_PER_LB", "2.10")

        orchestrator = bootstrap.build_intelligence_orchestrator(load_env=False)

        assert isinstance(orchestrator, IntelligenceOrchestrator)
        assert orchestrator.is_ready
        assert orchestrator._market_price_per_lb == 2.10
        await orchestrator.close()
        assert not orchestrator.is_ready

    def test_invalid_guidance_configuration(self, clean_env) -> None:
        clean_env.setenv("GUIDANCE_PROVIDER", "http")
        clean_env.delenv("GUIDANCE_API_URL", raising=False)

        with pytest.raises(ValueError):
            bootstrap.build_intelligence_orchestrator(load_env=False)

    def test_invalid_backend(self, clean_env) -> None:
        clean_env.setenv("REPOSITORY_BACKEND", "postgres")

        with pytest.raises(ValueError):
            bootstrap.build_intelligence_orchestrator(load_env=False)
