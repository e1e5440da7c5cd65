"""
Actor reference module for the resolver.

Combatants are addressed by their side and their position in that side's
roster, never by object reference.
"""

from pydantic import BaseModel, ConfigDict, Field

from .constants import Side


class ActorId(BaseModel):
    """Tagged index of a combatant: Party(index) or Enemy(index)."""

    model_config = ConfigDict(frozen=True)

    side: Side = Field(description="The roster the combatant belongs to.")
    index: int = Field(ge=0, description="The position in the roster.")

    @classmethod
    def party(cls, index: int) -> "ActorId":
        return cls(side=Side.PARTY, index=index)

    @classmethod
    def enemy(cls, index: int) -> "ActorId":
        return cls(side=Side.ENEMY, index=index)

    def is_party(self) -> bool:
        return self.side == Side.PARTY

    def is_enemy(self) -> bool:
        return self.side == Side.ENEMY

    def __str__(self) -> str:
        return f"{self.side.display_name}({self.index})"
