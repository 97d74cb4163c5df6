"""GetInfluencerUseCase - Lecture d'un influenceur et de ses profils."""

from backoffice.application.common.result import Result
from backoffice.application.dto.influencer_dto import InfluencerOutput
from backoffice.domain.entities import Influencer
from backoffice.domain.exceptions import InfluencerNotFoundError
from backoffice.domain.ports.repository import Repository


class GetInfluencerUseCase:

    def __init__(self, influencer_repo: Repository[Influencer, int]):
        self._influencer_repo = influencer_repo

    async def execute(self, influencer_id: int) -> Result[InfluencerOutput]:
        influencer = await self._influencer_repo.find_by_id(
            influencer_id, includes=["social_platforms"]
        )
        if influencer is None:
            return Result.fail(InfluencerNotFoundError(influencer_id))
        return Result.ok(InfluencerOutput.from_entity(influencer))
