"""IntelligenceOrchestrator - composes the analytics and workflow engines."""

from dataclasses import dataclass
from datetime import datetime, timezone
from statistics import mean
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import structlog

from domain.guidance.core.entities import GuidanceContext, LearningSession, MentorResponse
from domain.guidance.core.ports import IGuidanceProvider
from domain.intelligence.core.entities import (
    AnimalInsights,
    AnimalManagementMetrics,
    ComprehensiveAnimalProfile,
    DashboardAlerts,
    DashboardRecommendations,
    EducationalProgressReport,
    EducationalRecommendations,
    OverallPerformance,
    PersonalizedDashboard,
    PracticalSkills,
    ReportTimeframe,
    ResearchContributionSummary,
    ResearchDataContribution,
    ResearchParticipation,
)
from domain.intelligence.core.ports import (
    IContributionRepository,
    ILearningSessionRepository,
    IProfileRepository,
)
from domain.intelligence.core.value_objects import UpdateType
from domain.livestock.core.entities import (
    AnimalRef,
    FeedObservation,
    PhotoObservation,
    WeightObservation,
)
from domain.livestock.core.exceptions import (
    DivisionUndefinedError,
    NotFoundError,
    NotInitializedError,
    ValidationError,
)
from domain.livestock.core.ports import IFeedCatalog, IObservationHistory
from domain.livestock.core.value_objects import (
    FeedingMethod,
    MeasurementMethod,
    PerformanceRanking,
)
from domain.performance.calculation import (
    FCRService,
    FeedAnalysisService,
    FeedRecommendationService,
)
from domain.performance.core.entities import FCRResult
from domain.performance.core.ports import IFCRHistory
from domain.performance.core.value_objects import PerformanceGoals
from domain.visual.analysis import (
    BodyConditionService,
    GrowthPredictionService,
    VisualCorrelationService,
    VisualReportService,
)
from domain.visual.core.entities import VisualCorrelationResult, VisualFeedReport
from domain.workflow.core.entities import ResearchWorkflowConfig, WorkflowTrigger
from domain.workflow.core.value_objects import (
    AnonymizationLevel,
    TriggerPriority,
    TriggerType,
)
from domain.workflow.engine import WorkflowEngine
from domain.workflow.research import RecordAnonymizer, ResearchDataService
from domain.workflow.research.timestamps import coerce_timestamp

from .. import learning
from ..profile_builder import ProfileBuilder

logger = structlog.get_logger(__name__)

RESEARCH_VALUE_PER_POINT = 0.10
POINTS_PER_STUDY = 1000
RECENT_ACTIVITY_COUNT = 5

EMPTY_STATE_GUIDANCE = MentorResponse(
    guidance="Welcome! Start by adding your first animal to begin tracking.",
    recommendations=("Add animal profile", "Record initial weight", "Set up feeding schedule"),
    next_steps=("Complete animal profile", "Take first photo", "Begin daily logging"),
    resources=("Getting Started Guide", "Best Practices", "Video Tutorials"),
    confidence=90,
    personalization_level=30,
)

# Served when the guidance provider fails
FALLBACK_GUIDANCE = MentorResponse(
    guidance="Keep building your records; every entry sharpens the analysis.",
    recommendations=(
        "Keep consistent daily records",
        "Document every animal interaction",
        "Track feeding and growth patterns",
    ),
    next_steps=("Complete today's animal care tasks", "Review your progress goals"),
    resources=("Getting Started Guide", "Record Keeping Best Practices"),
    confidence=70,
    personalization_level=30,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AnalyticsEngines:
    """Domain services the orchestrator drives."""

    fcr: FCRService
    feed_analysis: FeedAnalysisService
    feed_recommendation: FeedRecommendationService
    body_condition: BodyConditionService
    growth_prediction: GrowthPredictionService
    correlation: VisualCorrelationService
    visual_report: VisualReportService
    research: ResearchDataService


class IntelligenceOrchestrator:
    """
    Entry point for animal data updates and per-user read-models.

    Flow for one update:
    1. Store the observation and run the matching analytics engine
    2. Record a learning session and hand it to the guidance provider
    3. Build workflow triggers and run them through the engine in order
    4. Rebuild the animal profile from history and upsert it

    The guidance provider is advisory: its failures are logged and
    replaced by FALLBACK_GUIDANCE or a dropped session upload.

    The instance is ready once constructed. After close() every
    operation raises NotInitializedError.

    Concurrency: updates for one animal must be awaited in submission
    order. Profiles are upserted by (user id, animal id) without locking,
    so overlapping un-awaited updates for the same animal leave whichever
    profile was written last.
    """

    def __init__(
        self,
        catalog: IFeedCatalog,
        observations: IObservationHistory,
        fcr_history: IFCRHistory,
        profiles: IProfileRepository,
        sessions: ILearningSessionRepository,
        contributions: IContributionRepository,
        guidance: IGuidanceProvider,
        workflow_engine: WorkflowEngine,
        engines: AnalyticsEngines,
        market_price_per_lb: float = 1.50,
        research_salt: str = "",
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._catalog = catalog
        self._observations = observations
        self._fcr_history = fcr_history
        self._profiles = profiles
        self._sessions = sessions
        self._contributions = contributions
        self._guidance = guidance
        self._workflow_engine = workflow_engine
        self._engines = engines
        self._market_price_per_lb = market_price_per_lb
        self._research_salt = research_salt
        self._clock = clock
        self._closed = False
        self._profile_builder = ProfileBuilder(
            catalog=catalog,
            observations=observations,
            fcr_history=fcr_history,
            feed_analysis=engines.feed_analysis,
            growth_prediction=engines.growth_prediction,
            clock=clock,
            body_condition=engines.body_condition,
        )

    @property
    def is_ready(self) -> bool:
        return not self._closed

    async def close(self) -> None:
        """Release collaborators; the orchestrator is unusable afterwards."""
        if self._closed:
            return
        self._closed = True
        await self._guidance.aclose()
        logger.info("Intelligence orchestrator closed")

    def _ensure_ready(self) -> None:
        if self._closed:
            raise NotInitializedError("IntelligenceOrchestrator")

    async def _record_session(self, session: LearningSession) -> None:
        try:
            await self._guidance.record_session(session)
        except Exception as e:
            logger.warning(
                "Learning session upload failed",
                user_id=session.user_id,
                activity=session.activity,
                error=str(e),
            )

    async def _get_guidance(self, context: GuidanceContext) -> MentorResponse:
        try:
            return await self._guidance.get_guidance(context)
        except Exception as e:
            logger.warning(
                "Guidance unavailable, using fallback",
                user_id=context.user_id,
                topic=context.topic,
                error=str(e),
            )
            return FALLBACK_GUIDANCE

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    async def process_animal_data_update(
        self,
        user_id: str,
        animal: AnimalRef,
        update_type: Union[UpdateType, str],
        data: Mapping[str, Any],
    ) -> ComprehensiveAnimalProfile:
        """
        Process one data update for an animal.

        A feed update whose window has no weight gain still succeeds; the
        undefined FCR is raised as a performance_alert trigger.

        Args:
            user_id: Owner of the animal
            animal: Animal the update is about
            update_type: weight, feed, photo, health or journal
            data: Update fields:
                weight  - weight, optional timestamp, method,
                          body_condition_score, confidence
                feed    - feed_product_id, amount, cost, optional
                          timestamp, feeding_method, notes
                photo   - photo (PhotoObservation)
                health / journal - free-form, optional challenges

        Returns:
            ComprehensiveAnimalProfile: The refreshed profile

        Raises:
            NotInitializedError: Orchestrator has been closed
            ValidationError: Unknown update type or malformed data
            InsufficientDataError: From the analytics engines
        """
        self._ensure_ready()
        kind = self._update_type(update_type)

        try:
            now = self._clock()
            triggers = self._apply_update(user_id, animal, kind, data, now)

            session = learning.build_session(
                user_id=user_id,
                animal_id=animal.animal_id,
                update_type=kind,
                timestamp=now,
                challenges=learning.update_challenges(kind, data),
            )
            await self._sessions.add(session)
            await self._record_session(session)

            user_sessions = await self._sessions.list_for_user(user_id)
            milestone = learning.milestone_for(len(user_sessions))
            if milestone is not None:
                triggers.append(
                    self._milestone_trigger(user_id, animal, session, user_sessions, milestone)
                )

            for trigger in triggers:
                await self._workflow_engine.trigger_workflow(trigger)

            animal_sessions = [s for s in user_sessions if s.animal_id == animal.animal_id]
            profile = self._profile_builder.build(user_id, animal, animal_sessions)
            await self._profiles.upsert(profile)

        except Exception as e:
            logger.error(
                "Animal data update failed",
                user_id=user_id,
                animal_id=animal.animal_id,
                update_type=kind.value,
                error=str(e),
                exc_info=True,
            )
            raise

        logger.info(
            "Animal data update processed",
            user_id=user_id,
            animal_id=animal.animal_id,
            update_type=kind.value,
            triggers=len(triggers),
        )
        return profile

    @staticmethod
    def _update_type(update_type: Union[UpdateType, str]) -> UpdateType:
        try:
            return UpdateType(update_type)
        except ValueError as e:
            raise ValidationError(f"Unknown update type: {update_type}") from e

    def _apply_update(
        self,
        user_id: str,
        animal: AnimalRef,
        kind: UpdateType,
        data: Mapping[str, Any],
        now: datetime,
    ) -> List[WorkflowTrigger]:
        """Store the observation, run its engine, and return its triggers."""
        if kind is UpdateType.WEIGHT:
            return self._apply_weight(user_id, animal, data, now)
        if kind is UpdateType.FEED:
            return self._apply_feed(user_id, animal, data, now)
        if kind is UpdateType.PHOTO:
            return self._apply_photo(user_id, animal, data)
        # health and journal updates only produce a learning session
        return []

    def _apply_weight(
        self, user_id: str, animal: AnimalRef, data: Mapping[str, Any], now: datetime
    ) -> List[WorkflowTrigger]:
        previous = self._observations.weights_for(animal.animal_id)
        try:
            method = MeasurementMethod(data.get("method", MeasurementMethod.SCALE))
        except ValueError as e:
            raise ValidationError(f"Unknown measurement method: {data.get('method')}") from e

        observation = WeightObservation(
            animal_id=animal.animal_id,
            weight=_number(data, "weight"),
            timestamp=data.get("timestamp") or now,
            method=method,
            body_condition_score=data.get("body_condition_score"),
            confidence=data.get("confidence"),
        )
        self._observations.add_weights([observation])

        previous_weight = previous[-1].weight if previous else None
        lost_weight = previous_weight is not None and observation.weight < previous_weight
        return [
            WorkflowTrigger.create(
                TriggerType.WEIGHT_CHANGE,
                user_id,
                {"current_weight": observation.weight, "previous_weight": previous_weight},
                animal_id=animal.animal_id,
                priority=TriggerPriority.HIGH if lost_weight else TriggerPriority.MEDIUM,
                timestamp=now,
            )
        ]

    def _apply_feed(
        self, user_id: str, animal: AnimalRef, data: Mapping[str, Any], now: datetime
    ) -> List[WorkflowTrigger]:
        try:
            feeding_method = FeedingMethod(data.get("feeding_method", FeedingMethod.MEASURED))
        except ValueError as e:
            raise ValidationError(
                f"Unknown feeding method: {data.get('feeding_method')}"
            ) from e

        observation = FeedObservation(
            animal_id=animal.animal_id,
            feed_product_id=str(data.get("feed_product_id") or ""),
            amount=_number(data, "amount"),
            cost=_number(data, "cost"),
            timestamp=data.get("timestamp") or now,
            feeding_method=feeding_method,
            notes=data.get("notes"),
        )
        self._observations.add_feeds([observation])

        triggers = [
            WorkflowTrigger.create(
                TriggerType.FEED_ENTRY,
                user_id,
                {
                    "feed_product_id": observation.feed_product_id,
                    "amount": observation.amount,
                    "cost": observation.cost,
                },
                animal_id=animal.animal_id,
                timestamp=now,
            )
        ]

        triggers.extend(self._calculate_fcr(user_id, animal, now))
        return triggers

    def _calculate_fcr(
        self, user_id: str, animal: AnimalRef, now: datetime
    ) -> List[WorkflowTrigger]:
        weights = self._observations.weights_for(animal.animal_id)
        if len(weights) < 2 or weights[-1].timestamp <= weights[0].timestamp:
            return []
        try:
            result = self._engines.fcr.calculate_fcr(
                weights, self._observations.feeds_for(animal.animal_id), animal
            )
        except DivisionUndefinedError as e:
            return [self._undefined_fcr_alert(user_id, animal, e.result, now)]
        return self._fcr_triggers(user_id, animal, result, now)

    @staticmethod
    def _undefined_fcr_alert(
        user_id: str, animal: AnimalRef, result: FCRResult, now: datetime
    ) -> WorkflowTrigger:
        metrics = result.metrics
        return WorkflowTrigger.create(
            TriggerType.PERFORMANCE_ALERT,
            user_id,
            {
                "metric": "fcr",
                "value": None,
                "threshold": result.benchmark.industry_average,
                "message": (
                    f"FCR is undefined: {metrics.total_weight_gained:.1f} lb gained "
                    f"over {result.window.elapsed_days} days"
                ),
            },
            animal_id=animal.animal_id,
            priority=TriggerPriority.HIGH,
            timestamp=now,
        )

    @staticmethod
    def _fcr_triggers(
        user_id: str, animal: AnimalRef, result: FCRResult, now: datetime
    ) -> List[WorkflowTrigger]:
        metrics = result.metrics
        ranking = result.performance_ranking
        triggers = [
            WorkflowTrigger.create(
                TriggerType.FCR_CALCULATION,
                user_id,
                {
                    "fcr": metrics.feed_conversion_ratio,
                    "average_daily_gain": metrics.average_daily_gain,
                    "cost_per_pound_gain": metrics.cost_per_pound_gain,
                    "performance_ranking": ranking.value if ranking else None,
                    "feed_product_id": result.feed_product_id,
                },
                animal_id=animal.animal_id,
                timestamp=now,
            )
        ]

        if ranking is not None and ranking.needs_attention:
            benchmark = result.benchmark.industry_average
            triggers.append(
                WorkflowTrigger.create(
                    TriggerType.PERFORMANCE_ALERT,
                    user_id,
                    {
                        "metric": "fcr",
                        "value": metrics.feed_conversion_ratio,
                        "threshold": benchmark,
                        "message": (
                            f"FCR {metrics.feed_conversion_ratio:.2f} ranks "
                            f"{ranking.value} against benchmark {benchmark:.2f}"
                        ),
                    },
                    animal_id=animal.animal_id,
                    priority=TriggerPriority.HIGH,
                    timestamp=now,
                )
            )
        return triggers

    def _apply_photo(
        self, user_id: str, animal: AnimalRef, data: Mapping[str, Any]
    ) -> List[WorkflowTrigger]:
        photo = data.get("photo")
        if not isinstance(photo, PhotoObservation):
            raise ValidationError("Photo update needs a 'photo' PhotoObservation")
        if photo.animal_id != animal.animal_id:
            raise ValidationError(
                f"Photo belongs to {photo.animal_id}, not {animal.animal_id}"
            )

        self._observations.add_photo(photo)

        health = photo.mean_health_score()
        return [
            WorkflowTrigger.create(
                TriggerType.PHOTO_ANALYSIS,
                user_id,
                {
                    "body_condition_score": photo.body_condition_score,
                    "estimated_weight": photo.estimated_weight,
                    "health_score": health * 10 if health is not None else None,
                    "photo_id": photo.photo_id,
                },
                animal_id=animal.animal_id,
                priority=TriggerPriority.HIGH if photo.health_concerns() else TriggerPriority.MEDIUM,
                timestamp=photo.captured_at,
            )
        ]

    @staticmethod
    def _milestone_trigger(
        user_id: str,
        animal: AnimalRef,
        session: LearningSession,
        user_sessions: Sequence[LearningSession],
        milestone: str,
    ) -> WorkflowTrigger:
        level = learning.learning_progression(learning.competency_level(user_sessions))
        return WorkflowTrigger.create(
            TriggerType.EDUCATIONAL_MILESTONE,
            user_id,
            {"milestone": milestone, "competency": session.activity, "level": level},
            animal_id=animal.animal_id,
            timestamp=session.timestamp,
        )

    # ------------------------------------------------------------------
    # Read-models
    # ------------------------------------------------------------------

    async def generate_personalized_dashboard(self, user_id: str) -> PersonalizedDashboard:
        """
        Build the dashboard for a user.

        A user without profiles gets the empty-state dashboard: no
        animals, welcome guidance, no alerts. The guidance provider is
        not called in that case.
        """
        self._ensure_ready()
        profiles = await self._profiles.list_for_user(user_id)
        if not profiles:
            logger.debug("Empty dashboard", user_id=user_id)
            return self._empty_dashboard(user_id)

        overall = self._overall_performance(profiles)
        sessions = await self._sessions.list_for_user(user_id)
        competency = mean(p.education.competency_level for p in profiles)

        guidance = await self._get_guidance(
            GuidanceContext(
                user_id=user_id,
                topic="dashboard_review",
                data={
                    "skill_level": learning.learning_progression(competency),
                    "animal_count": len(profiles),
                    "average_fcr": overall.average_fcr,
                    "performance_ranking": overall.performance_ranking,
                },
                recent_activities=tuple(
                    s.activity for s in sessions[-RECENT_ACTIVITY_COUNT:]
                ),
            )
        )

        dashboard = PersonalizedDashboard(
            user_id=user_id,
            animals=tuple(profiles),
            overall_performance=overall,
            recommendations=self._dashboard_recommendations(profiles, guidance),
            alerts=self._dashboard_alerts(profiles),
            research_contributions=await self._research_summary(user_id),
        )
        logger.info(
            "Personalized dashboard generated",
            user_id=user_id,
            animals=dashboard.animal_count,
            ranking=overall.performance_ranking,
        )
        return dashboard

    @staticmethod
    def _empty_dashboard(user_id: str) -> PersonalizedDashboard:
        return PersonalizedDashboard(
            user_id=user_id,
            animals=(),
            overall_performance=OverallPerformance(
                average_fcr=None,
                total_investment=0.0,
                projected_roi=0.0,
                performance_ranking="new_user",
            ),
            recommendations=DashboardRecommendations(
                immediate=EMPTY_STATE_GUIDANCE,
                educational_next=("Basic Animal Husbandry", "Record Keeping Fundamentals"),
            ),
            alerts=DashboardAlerts(
                educational_milestones=("Complete your first week of logging",),
            ),
            research_contributions=ResearchContributionSummary(),
        )

    def _overall_performance(
        self, profiles: Sequence[ComprehensiveAnimalProfile]
    ) -> OverallPerformance:
        fcrs = [
            p.performance.current_fcr for p in profiles if p.performance.current_fcr is not None
        ]
        investment = sum(p.performance.total_feed_cost for p in profiles)
        gained = sum(max(0.0, p.performance.total_weight_gained) for p in profiles)

        roi = 0.0
        if investment > 0:
            market_value = gained * self._market_price_per_lb
            roi = (market_value - investment) / investment * 100

        average_fcr = round(mean(fcrs), 2) if fcrs else None
        if average_fcr is None:
            ranking = "insufficient_data"
        elif average_fcr < 6.0:
            ranking = "excellent"
        elif average_fcr < 7.0:
            ranking = "good"
        else:
            ranking = "average"

        return OverallPerformance(
            average_fcr=average_fcr,
            total_investment=round(investment, 2),
            projected_roi=round(roi, 1),
            performance_ranking=ranking,
        )

    def _dashboard_recommendations(
        self, profiles: Sequence[ComprehensiveAnimalProfile], guidance: MentorResponse
    ) -> DashboardRecommendations:
        feed_optimization = []
        cost_savings = []
        for profile in profiles:
            name = profile.animal.display_name()
            try:
                recommendation = self._engines.feed_recommendation.predict_optimal_feed(
                    profile.animal, PerformanceGoals()
                )
            except NotFoundError:
                logger.debug("No feed candidates", animal_id=profile.animal_id)
            else:
                product = recommendation.recommended_feed
                if product.product_id != profile.feed.current_feed:
                    feed_optimization.append(f"{name}: consider {product.display_name()}")

            if profile.feed.cost_optimization > 0 and profile.feed.current_feed:
                cost_savings.append(
                    f"{name}: up to {profile.feed.cost_optimization:.0f}% FCR improvement "
                    f"available on {profile.feed.current_feed}"
                )

        educational_next: Dict[str, None] = {}
        for profile in profiles:
            for milestone in profile.education.next_milestones:
                educational_next.setdefault(milestone, None)

        return DashboardRecommendations(
            immediate=guidance,
            feed_optimization=tuple(feed_optimization),
            educational_next=tuple(educational_next),
            cost_savings=tuple(cost_savings),
        )

    @staticmethod
    def _dashboard_alerts(profiles: Sequence[ComprehensiveAnimalProfile]) -> DashboardAlerts:
        performance, health, milestones, market = [], [], [], []
        for profile in profiles:
            name = profile.animal.display_name()
            ranking = profile.performance.performance_ranking
            fcr = profile.performance.current_fcr

            if ranking is not None and ranking.needs_attention and fcr is not None:
                performance.append(f"{name}: FCR {fcr:.2f} ranks {ranking.value}")
            if ranking is PerformanceRanking.EXCELLENT:
                market.append(f"{name}: excellent feed efficiency, strong show or sale candidate")
            health.extend(f"{name}: {concern}" for concern in profile.visual.health_concerns)
            if profile.education.learning_progression != "beginner":
                milestones.append(
                    f"{name}: {profile.education.learning_progression} competency reached"
                )

        return DashboardAlerts(
            performance_alerts=tuple(performance),
            health_concerns=tuple(health),
            educational_milestones=tuple(milestones),
            market_opportunities=tuple(market),
        )

    async def _research_summary(self, user_id: str) -> ResearchContributionSummary:
        contributions = await self._contributions.list_for_user(user_id)
        if not contributions:
            return ResearchContributionSummary()
        return ResearchContributionSummary(
            data_points_contributed=sum(c.data_points for c in contributions),
            studies_supported=sum(c.studies_enabled for c in contributions),
            anonymized_value=round(sum(c.research_value for c in contributions), 2),
            impact_score=round(mean(c.quality_score for c in contributions), 1),
        )

    async def generate_educational_progress_report(
        self, student_id: str, start: datetime, end: datetime
    ) -> EducationalProgressReport:
        """
        Summarise a student's activity between start and end (inclusive).

        Practical skill scores grow with the number of matching logged
        activities; skills at 60 or above are strengths.
        """
        self._ensure_ready()
        timeframe = ReportTimeframe(start=start, end=end)

        sessions = [
            s
            for s in await self._sessions.list_for_user(student_id)
            if timeframe.contains(s.timestamp)
        ]
        contributions = [
            c
            for c in await self._contributions.list_for_user(student_id)
            if timeframe.contains(c.period_end)
        ]

        skills = learning.practical_skill_scores(sessions)
        strengths = tuple(k for k, v in skills.items() if v >= learning.STRENGTH_THRESHOLD)
        gaps = tuple(k for k, v in skills.items() if v < learning.STRENGTH_THRESHOLD)

        report = EducationalProgressReport(
            student_id=student_id,
            timeframe=timeframe,
            animal_management=AnimalManagementMetrics(
                animals_managed=len({s.animal_id for s in sessions}),
                total_hours=round(sum(s.duration_minutes for s in sessions) / 60, 1),
                activities_completed=len(sessions),
                skills_demonstrated=learning.skills_learned(sessions),
            ),
            practical_skills=PracticalSkills(**skills),
            research_participation=ResearchParticipation(
                data_contributed=bool(contributions),
                contributions=len(contributions),
                data_points=sum(c.data_points for c in contributions),
                studies_supported=sum(c.studies_enabled for c in contributions),
            ),
            recommendations=EducationalRecommendations(
                strength_areas=strengths,
                improvement_opportunities=gaps,
                next_steps=tuple(learning.SKILL_NEXT_STEPS[k] for k in gaps),
                career_pathways=tuple(learning.CAREER_PATHWAYS[k] for k in strengths),
            ),
            generated_at=self._clock(),
        )
        logger.info(
            "Educational progress report generated",
            student_id=student_id,
            activities=len(sessions),
            strengths=len(strengths),
        )
        return report

    async def process_research_data_contribution(
        self,
        user_id: str,
        data_type: str,
        records: Sequence[Mapping[str, Any]],
        anonymization_level: Union[AnonymizationLevel, str] = AnonymizationLevel.ADVANCED,
    ) -> ResearchDataContribution:
        """
        Anonymize and score contributed records, then store the contribution.

        research value = records x $0.10 x quality / 100
        studies enabled = one per 1000 records
        """
        self._ensure_ready()
        try:
            level = AnonymizationLevel(anonymization_level)
        except ValueError as e:
            raise ValidationError(f"Unknown anonymization level: {anonymization_level}") from e

        result = await self._engines.research.process_research_data_workflow(
            data_type,
            records,
            ResearchWorkflowConfig(anonymization_level=level, salt=self._research_salt),
        )

        quality = round(result.quality.overall, 1)
        stamps = sorted(
            s for s in (coerce_timestamp(r.get("timestamp")) for r in records) if s is not None
        )
        contribution = ResearchDataContribution(
            contributor_id=RecordAnonymizer(level, self._research_salt).pseudonym(user_id),
            data_type=data_type,
            anonymization_level=level,
            data_points=len(records),
            quality_score=quality,
            research_value=round(len(records) * RESEARCH_VALUE_PER_POINT * quality / 100, 2),
            period_start=stamps[0] if stamps else result.processed_at,
            period_end=stamps[-1] if stamps else result.processed_at,
            studies_enabled=len(records) // POINTS_PER_STUDY,
            educational_improvement=round(quality / 10),
            compliant=result.compliance.compliant,
        )
        await self._contributions.add(user_id, contribution)

        logger.info(
            "Research contribution processed",
            data_type=data_type,
            data_points=contribution.data_points,
            quality=quality,
        )
        return contribution

    async def get_animal_insights(self, user_id: str, animal_id: str) -> AnimalInsights:
        """
        On-demand analysis of one cached animal.

        Raises:
            NotFoundError: No profile for this user and animal
        """
        self._ensure_ready()
        profile = await self._profiles.get(user_id, animal_id)
        if profile is None:
            raise NotFoundError("animal_profile", animal_id)

        feed_analysis = None
        current_feed = profile.feed.current_feed
        if current_feed and self._catalog.get(current_feed) is not None:
            feed_analysis = self._engines.feed_analysis.analyze_feed_performance(
                animal_id, current_feed
            )

        photos = self._observations.photos_for(animal_id)
        visual = None
        if photos:
            visual = self._engines.correlation.correlate_feed_to_visual_progress(
                photos, self._observations.feeds_for(animal_id)
            )

        guidance = await self._get_guidance(
            GuidanceContext(
                user_id=user_id,
                topic="animal_analysis",
                animal_id=animal_id,
                species=profile.animal.species,
                data={
                    "current_fcr": profile.performance.current_fcr,
                    "health_status": profile.performance.health_status,
                    "body_condition_score": profile.visual.body_condition_score,
                },
            )
        )

        return AnimalInsights(
            profile=profile,
            guidance=guidance,
            feed_analysis=feed_analysis,
            visual_correlation=visual,
            recommendations=self._animal_recommendations(profile),
            insights=self._animal_insights(profile, visual),
        )

    @staticmethod
    def _animal_recommendations(profile: ComprehensiveAnimalProfile) -> Tuple[str, ...]:
        performance = profile.performance
        ranking = performance.performance_ranking
        recommendations = []
        if ranking is not None and ranking.needs_attention:
            recommendations.append(
                f"Review the ration: FCR ranks {ranking.value} "
                "against its benchmark"
            )
        if performance.weigh_ins < 2:
            recommendations.append("Record at least two weights to calculate feed conversion")
        if profile.visual.photo_count == 0:
            recommendations.append("Take weekly photos for body condition monitoring")
        if performance.health_status in ("monitor", "poor"):
            recommendations.append("Schedule a health check for the flagged indicators")
        if not recommendations:
            recommendations.append("Continue current feeding schedule - performance is on track")
        return tuple(recommendations)

    @staticmethod
    def _animal_insights(
        profile: ComprehensiveAnimalProfile, visual: Optional[VisualCorrelationResult]
    ) -> Tuple[str, ...]:
        performance = profile.performance
        insights = []
        if performance.current_fcr is not None and performance.performance_ranking is not None:
            insights.append(
                f"FCR of {performance.current_fcr:.2f} ranks "
                f"{performance.performance_ranking.value}"
            )
        if performance.average_daily_gain is not None:
            insights.append(f"Average daily gain is {performance.average_daily_gain:.2f} lb/day")
        if profile.visual.photo_count >= 2:
            insights.append(f"Body condition is {performance.body_condition_trend.value}")
        if visual is not None and visual.correlation_coefficient is not None:
            insights.append(
                f"Feed-to-visual correlation strength is {visual.correlation_strength:.0f}/100"
            )
        return tuple(insights)

    def generate_visual_feed_report(self, animal: AnimalRef) -> VisualFeedReport:
        """Visual feed report over the animal's photo history."""
        self._ensure_ready()
        return self._engines.visual_report.generate_visual_feed_report(animal)


def _number(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"'{key}' is required and must be a number")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"'{key}' must be a number, got {value!r}") from e
