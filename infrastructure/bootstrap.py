"""Composition root.

Wires repositories, analytics engines, the workflow engine and the
guidance provider into an IntelligenceOrchestrator. Every collaborator
can be injected; anything left out is built from the environment.

Usage:
    from infrastructure.bootstrap import build_intelligence_orchestrator

    orchestrator = build_intelligence_orchestrator()
    profile = await orchestrator.process_animal_data_update(
        "user_1", animal, "weight", {"weight": 62.5}
    )
"""

from typing import Iterable, List, Optional

import structlog

from application.intelligence.analyzers import build_analyzers
from application.intelligence.orchestrators import AnalyticsEngines, IntelligenceOrchestrator
from domain.guidance.core.ports import IGuidanceProvider
from domain.livestock.core.ports import IFeedCatalog
from domain.performance.calculation import (
    FCRService,
    FeedAnalysisService,
    FeedRecommendationService,
)
from domain.performance.ml import GrowthTrajectoryService
from domain.visual.analysis import (
    BodyConditionService,
    GrowthPredictionService,
    VisualCorrelationService,
    VisualReportService,
)
from domain.workflow.core.entities import Workflow
from domain.workflow.core.ports import (
    IDeliveryService,
    IExternalApiClient,
    IFollowUpScheduler,
    IResearchExporter,
)
from domain.workflow.definitions import load_default_workflows, load_workflows_from_file
from domain.workflow.engine import ActionExecutor, WorkflowEngine
from domain.workflow.intervention import InterventionService
from domain.workflow.research import ResearchDataService
from infrastructure.catalog import InMemoryFeedCatalog
from infrastructure.config import (
    get_integration_api_key,
    get_integration_api_url,
    get_market_price_per_lb,
    get_research_salt,
    get_workflow_definitions_path,
    load_environment,
)
from infrastructure.delivery import InMemoryOutbox
from infrastructure.external_apis import HttpIntegrationClient
from infrastructure.guidance import create_guidance_provider
from infrastructure.persistence.factory import Repositories, create_repositories
from infrastructure.research import InMemoryResearchExporter
from infrastructure.scheduler import APSchedulerFollowUpScheduler

logger = structlog.get_logger(__name__)


def load_configured_workflows() -> List[Workflow]:
    """Workflows from WORKFLOW_DEFINITIONS_PATH, or the bundled defaults."""
    path = get_workflow_definitions_path()
    if path:
        logger.info("Loading workflow definitions", path=path)
        return load_workflows_from_file(path)
    return load_default_workflows()


def _external_api_from_env() -> Optional[IExternalApiClient]:
    url = get_integration_api_url()
    if not url:
        return None
    return HttpIntegrationClient(url, api_key=get_integration_api_key())


def build_intelligence_orchestrator(
    repositories: Optional[Repositories] = None,
    catalog: Optional[IFeedCatalog] = None,
    guidance: Optional[IGuidanceProvider] = None,
    delivery: Optional[IDeliveryService] = None,
    scheduler: Optional[IFollowUpScheduler] = None,
    exporter: Optional[IResearchExporter] = None,
    external_api: Optional[IExternalApiClient] = None,
    workflows: Optional[Iterable[Workflow]] = None,
    load_env: bool = True,
) -> IntelligenceOrchestrator:
    """
    Build a ready orchestrator.

    Args:
        repositories: Stores (default: REPOSITORY_BACKEND factory)
        catalog: Feed catalog (default: seeded in-memory catalog)
        guidance: Guidance provider (default: GUIDANCE_PROVIDER factory)
        delivery: Delivery sink (default: InMemoryOutbox)
        scheduler: Follow-up scheduler (default: APScheduler, not started)
        exporter: Research exporter (default: in-memory)
        external_api: Integration client (default: INTEGRATION_API_URL)
        workflows: Workflow definitions (default: configured or bundled)
        load_env: Read `.env` before resolving defaults

    Raises:
        ValueError: Invalid backend or provider configuration
        ValidationError: Malformed workflow definitions
    """
    if load_env:
        load_environment()

    repos = repositories or create_repositories()
    catalog = catalog or InMemoryFeedCatalog()
    guidance = guidance or create_guidance_provider()
    delivery = delivery or InMemoryOutbox()
    scheduler = scheduler or APSchedulerFollowUpScheduler()
    exporter = exporter or InMemoryResearchExporter()
    if external_api is None:
        external_api = _external_api_from_env()

    correlation = VisualCorrelationService()
    feed_analysis = FeedAnalysisService(catalog, repos.observations, repos.fcr_history)
    engines = AnalyticsEngines(
        fcr=FCRService(catalog, repos.fcr_history),
        feed_analysis=feed_analysis,
        feed_recommendation=FeedRecommendationService(catalog),
        body_condition=BodyConditionService(),
        growth_prediction=GrowthPredictionService(),
        correlation=correlation,
        visual_report=VisualReportService(repos.observations, correlation),
        research=ResearchDataService(exporter=exporter),
    )

    executor = ActionExecutor(
        delivery=delivery,
        guidance=guidance,
        interventions=InterventionService(delivery, scheduler),
        analyzers=build_analyzers(
            repos.observations, feed_analysis, GrowthTrajectoryService(), correlation
        ),
        external_api=external_api,
    )
    definitions = list(workflows) if workflows is not None else load_configured_workflows()
    engine = WorkflowEngine(definitions, executor, history=repos.executions)

    logger.info(
        "Intelligence orchestrator built",
        workflows=len(definitions),
        guidance=type(guidance).__name__,
        external_api=external_api is not None,
    )
    return IntelligenceOrchestrator(
        catalog=catalog,
        observations=repos.observations,
        fcr_history=repos.fcr_history,
        profiles=repos.profiles,
        sessions=repos.sessions,
        contributions=repos.contributions,
        guidance=guidance,
        workflow_engine=engine,
        engines=engines,
        market_price_per_lb=get_market_price_per_lb(),
        research_salt=get_research_salt(),
    )
