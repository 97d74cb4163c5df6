"""
DeleteInfluencerUseCase - Suppression d'un influenceur.

Regles:
-------
- Influenceur inexistant -> INFLUENCER_NOT_FOUND
- Beats existants -> INFLUENCER_HAS_BEATS (rien n'est supprime)
- Sinon l'influenceur et tous ses profils sociaux sont supprimes

Le comptage des beats et la suppression partagent la transaction.
"""

from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.influencer_dto import InfluencerOutput
from backoffice.application.ports.services import ActivityLogger
from backoffice.domain.entities import Beat
from backoffice.domain.exceptions import InfluencerHasBeatsError, InfluencerNotFoundError
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork
from backoffice.domain.specification import Specification


class DeleteInfluencerUseCase:

    def __init__(self, unit_of_work: UnitOfWork, activity_logger: ActivityLogger):
        self._unit_of_work = unit_of_work
        self._activity_logger = activity_logger

    async def execute(self, influencer_id: int) -> Result[None]:
        before: dict = {}

        async def work(repos: Repositories) -> Result[None]:
            influencer = await repos.influencers.find_by_id(
                influencer_id, includes=["social_platforms"]
            )
            if influencer is None:
                return Result.fail(InfluencerNotFoundError(influencer_id))

            beats_count = await repos.beats.count(
                Specification(Beat).where_equal("influencer_id", influencer_id)
            )
            if beats_count > 0:
                return Result.fail(InfluencerHasBeatsError(influencer_id, beats_count))

            before.update(to_record(InfluencerOutput.from_entity(influencer)))
            await repos.influencers.delete(influencer_id)
            return Result.ok()

        result = await self._unit_of_work.execute(work)

        if result.success:
            await self._activity_logger.log_delete("influencer", influencer_id, before)
        return result
