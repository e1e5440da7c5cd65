"""
Turn resolver for the battle between the party and an enemy group.

`BattleState.execute_turn` resolves one whole round in a single call: the
flee check, the action order, every actor's action, buff decay and poison.
Its outcome is reported as an ordered list of events, which is also appended
to the permanent turn log of the battle.
"""

from collections.abc import Sequence

from actions.base_action import (
    AttackAction,
    BaseAction,
    FleeAction,
    SpellAction,
    UseItemAction,
)
from actions.spells.base_spell import SpellKind
from catchery import log_debug, log_warning
from character.character_effects import CharacterEffects
from character.character_stats import CombatStats
from character.enemy import Enemy
from character.party_member import PartyMember
from core.actor import ActorId
from core.constants import (
    FLEE_SUCCESS_THRESHOLD,
    POISON_DAMAGE,
    Ailment,
    BuffStat,
    Side,
    SpellEffect,
)
from core.error_handling import BattleInputError
from effects.event_system import (
    AilmentCuredEvent,
    AilmentInflictedEvent,
    AilmentResistedEvent,
    AttackEvent,
    BuffedEvent,
    BuffExpiredEvent,
    DefeatedEvent,
    FledEvent,
    FleeFailedEvent,
    HealedEvent,
    ItemUsedEvent,
    MpDrainedEvent,
    PoisonDamageEvent,
    SleepingEvent,
    SpellDamageEvent,
    TurnResult,
)
from items.item import ItemKind

from combat.damage import (
    calculate_ailment_success,
    calculate_heal_amount,
    calculate_mp_drain,
    calculate_physical_damage,
    calculate_spell_damage,
)
from combat.npc_ai import choose_enemy_action
from combat.random_factors import TurnRandomFactors

# Buff spell effects and the statistic they raise.
_BUFF_STATS: dict[SpellEffect, BuffStat] = {
    SpellEffect.ATTACK_BUFF: BuffStat.ATTACK,
    SpellEffect.DEFENSE_BUFF: BuffStat.DEFENSE,
}


class BattleState:
    """
    Owns both rosters of an encounter, the status of every combatant and the
    log of every event produced so far.

    Combatants are addressed by `ActorId`, a side plus a roster index. The
    status trackers are parallel to the rosters.
    """

    def __init__(self, party: list[PartyMember], enemies: list[Enemy]) -> None:
        """
        Initialize the battle from a party roster and a generated enemy group.

        Args:
            party (list[PartyMember]): The party, mutated in place.
            enemies (list[Enemy]): The enemy group, mutated in place.

        """
        self.party: list[PartyMember] = party
        self.enemies: list[Enemy] = enemies
        self.party_effects: list[CharacterEffects] = [CharacterEffects() for _ in party]
        self.enemy_effects: list[CharacterEffects] = [CharacterEffects() for _ in enemies]
        self.turn_log: list[TurnResult] = []
        self.turn_number: int = 0

    # ============================================================================
    # ROSTER QUERIES
    # ============================================================================

    def _roster(self, side: Side) -> Sequence[PartyMember | Enemy]:
        return self.party if side == Side.PARTY else self.enemies

    def _check_actor(self, actor: ActorId) -> None:
        roster_size = len(self._roster(actor.side))
        if actor.index >= roster_size:
            context = {"actor": str(actor), "roster_size": roster_size}
            log_warning("Actor index out of range", context)
            raise BattleInputError("Actor index out of range", context)

    def stats_of(self, actor: ActorId) -> CombatStats:
        """Returns the combat stats of a combatant."""
        self._check_actor(actor)
        return self._roster(actor.side)[actor.index].stats

    def effects_of(self, actor: ActorId) -> CharacterEffects:
        """Returns the buffs and ailments of a combatant."""
        self._check_actor(actor)
        if actor.side == Side.PARTY:
            return self.party_effects[actor.index]
        return self.enemy_effects[actor.index]

    def is_alive(self, actor: ActorId) -> bool:
        return self.stats_of(actor).is_alive()

    def living_members(self, side: Side) -> list[ActorId]:
        """Returns the living members of a side, in roster order."""
        return [
            ActorId(side=side, index=index)
            for index, combatant in enumerate(self._roster(side))
            if combatant.stats.is_alive()
        ]

    def first_living(self, side: Side) -> ActorId | None:
        living = self.living_members(side)
        return living[0] if living else None

    def effective_attack(self, actor: ActorId) -> int:
        """
        Attack used by physical damage: base, plus the weapon bonus for party
        members, plus the active attack buff.
        """
        if actor.side == Side.PARTY:
            self._check_actor(actor)
            base = self.party[actor.index].effective_attack()
        else:
            base = self.stats_of(actor).attack
        return base + self.effects_of(actor).buff_amount(BuffStat.ATTACK)

    def effective_defense(self, actor: ActorId) -> int:
        """Defense used by every damage formula: base plus the defense buff."""
        return self.stats_of(actor).defense + self.effects_of(actor).buff_amount(
            BuffStat.DEFENSE
        )

    # ============================================================================
    # BATTLE OUTCOME
    # ============================================================================

    def is_victory(self) -> bool:
        return all(not enemy.is_alive() for enemy in self.enemies)

    def is_party_wiped(self) -> bool:
        return all(not member.is_alive() for member in self.party)

    def has_fled(self) -> bool:
        return any(isinstance(event, FledEvent) for event in self.turn_log)

    def is_over(self) -> bool:
        """True once the enemies are all defeated, the party is wiped or it fled."""
        return self.is_victory() or self.is_party_wiped() or self.has_fled()

    def total_exp_reward(self) -> int:
        """Experience granted by the defeated enemies."""
        return sum(enemy.exp_reward() for enemy in self.enemies if not enemy.is_alive())

    def total_gold_reward(self) -> int:
        """Gold granted by the defeated enemies."""
        return sum(enemy.gold_reward() for enemy in self.enemies if not enemy.is_alive())

    # ============================================================================
    # TURN EXECUTION
    # ============================================================================

    def execute_turn(
        self,
        commands: Sequence[BaseAction | None],
        random_factors: TurnRandomFactors,
    ) -> list[TurnResult]:
        """
        Resolves one full round.

        Args:
            commands (Sequence[BaseAction | None]):
                One command per party member, indexed by roster position.
                None, or a missing trailing entry, means no command.
            random_factors (TurnRandomFactors):
                The random values consumed by the round.

        Returns:
            list[TurnResult]:
                The events of the round, in the order they happened.

        Raises:
            BattleInputError:
                If a command targets an actor outside its roster, or if a
                random array is shorter than the round requires.

        """
        self._validate_commands(commands)

        events: list[TurnResult] = []
        if any(isinstance(command, FleeAction) for command in commands):
            if self._resolve_flee(random_factors, events):
                return self._finish_turn(events)
        else:
            order = self._build_action_order(commands)
            self._validate_randoms(random_factors, len(order))
            for slot, actor in enumerate(order):
                if self._battle_decided():
                    break
                self._execute_slot(slot, actor, commands, random_factors, events)

        self._decay_buffs(events)
        self._tick_poison(events)
        return self._finish_turn(events)

    def _finish_turn(self, events: list[TurnResult]) -> list[TurnResult]:
        self.turn_number += 1
        self.turn_log.extend(events)
        log_debug(
            "Turn resolved",
            {
                "turn": self.turn_number,
                "events": len(events),
                "over": self.is_over(),
            },
        )
        return events

    def _battle_decided(self) -> bool:
        return self.is_victory() or self.is_party_wiped()

    def _validate_commands(self, commands: Sequence[BaseAction | None]) -> None:
        if len(commands) > len(self.party):
            context = {"commands": len(commands), "party": len(self.party)}
            log_warning("More commands than party members", context)
            raise BattleInputError("More commands than party members", context)
        for index, command in enumerate(commands):
            target = getattr(command, "target", None)
            if target is None:
                continue
            self._check_actor(target)
            expected = self._intended_side(command)
            if expected is not None and target.side != expected:
                context = {"member": index, "command": str(command), "expected": expected}
                log_warning("Command targets the wrong side", context)
                raise BattleInputError("Command targets the wrong side", context)

    @staticmethod
    def _intended_side(command: BaseAction | None) -> Side | None:
        """The side a party command must point at, None if the target is ignored."""
        if isinstance(command, AttackAction):
            return Side.ENEMY
        if isinstance(command, UseItemAction):
            return Side.PARTY
        if isinstance(command, SpellAction) and command.spell.target_shape.is_single():
            return command.spell.target_shape.target_side(Side.PARTY)
        return None

    def _validate_randoms(self, random_factors: TurnRandomFactors, slots: int) -> None:
        problems: dict[str, int] = {}
        if len(random_factors.damage_randoms) < slots:
            problems["damage_randoms"] = len(random_factors.damage_randoms)
        if (
            random_factors.ailment_randoms is not None
            and len(random_factors.ailment_randoms) < slots
        ):
            problems["ailment_randoms"] = len(random_factors.ailment_randoms)
        if len(random_factors.spell_randoms) < len(self.enemies):
            problems["spell_randoms"] = len(random_factors.spell_randoms)
        if problems:
            context = {"slots": slots, "enemies": len(self.enemies), **problems}
            log_warning("Random factor arrays are too short", context)
            raise BattleInputError("Random factor arrays are too short", context)

    def _resolve_flee(
        self,
        random_factors: TurnRandomFactors,
        events: list[TurnResult],
    ) -> bool:
        """
        Resolves a turn in which the party tried to flee. On success the only
        event is `Fled`; otherwise only the living enemies act, in roster
        order, each consuming the next slot of the random arrays.

        Returns:
            bool: True if the party escaped.

        """
        if random_factors.flee_random < FLEE_SUCCESS_THRESHOLD:
            log_debug("The party fled", {"flee_random": random_factors.flee_random})
            events.append(FledEvent())
            return True

        events.append(FleeFailedEvent())
        living = self.living_members(Side.ENEMY)
        self._validate_randoms(random_factors, len(living))
        for slot, actor in enumerate(living):
            if self._battle_decided():
                break
            if self.effects_of(actor).is_incapacitated():
                events.append(SleepingEvent(actor=actor))
                continue
            self._execute_enemy(
                actor,
                random_factors.damage_randoms[slot],
                random_factors.ailment_random(slot),
                random_factors.spell_randoms[actor.index],
                events,
            )
        return False

    def _build_action_order(self, commands: Sequence[BaseAction | None]) -> list[ActorId]:
        """
        Orders the acting combatants by descending speed. Ties go to the
        party, then to the lower roster index.
        """
        entries: list[tuple[int, int, int, ActorId]] = []
        for index, member in enumerate(self.party):
            if index < len(commands) and commands[index] is not None and member.is_alive():
                entries.append((-member.stats.speed, 0, index, ActorId.party(index)))
        for index, enemy in enumerate(self.enemies):
            if enemy.is_alive():
                entries.append((-enemy.stats.speed, 1, index, ActorId.enemy(index)))
        entries.sort(key=lambda entry: entry[:3])
        return [entry[3] for entry in entries]

    def _execute_slot(
        self,
        slot: int,
        actor: ActorId,
        commands: Sequence[BaseAction | None],
        random_factors: TurnRandomFactors,
        events: list[TurnResult],
    ) -> None:
        """Runs the action of one slot of the action order."""
        # Fallen actors and sleepers still own their slot and its random factor.
        if not self.is_alive(actor):
            return
        if self.effects_of(actor).is_incapacitated():
            events.append(SleepingEvent(actor=actor))
            return

        random_factor = random_factors.damage_randoms[slot]
        ailment_random = random_factors.ailment_random(slot)
        if actor.is_party():
            command = commands[actor.index]
            if isinstance(command, AttackAction):
                target = self._retarget(command.target)
                if target is None:
                    log_debug("No living enemy to attack", {"attacker": str(actor)})
                    return
                self._physical_attack(actor, target, random_factor, events)
            elif isinstance(command, SpellAction):
                self._cast_spell(
                    actor, command.spell, command.target, random_factor, ailment_random, events
                )
            elif isinstance(command, UseItemAction):
                self._use_item(actor, command.item, command.target, random_factor, events)
        else:
            self._execute_enemy(
                actor,
                random_factor,
                ailment_random,
                random_factors.spell_randoms[actor.index],
                events,
            )

    def _execute_enemy(
        self,
        actor: ActorId,
        random_factor: float,
        ailment_random: float,
        spell_random: float,
        events: list[TurnResult],
    ) -> None:
        selection = choose_enemy_action(self.enemies[actor.index], spell_random)
        if selection.spell is not None:
            if selection.spell.effect in _BUFF_STATS:
                log_debug(
                    "Enemies cannot use buff spells",
                    {"enemy": str(actor), "spell": selection.spell},
                )
                return
            self._cast_spell(actor, selection.spell, None, random_factor, ailment_random, events)
            return

        target = self.first_living(Side.PARTY)
        if target is None:
            return
        self._physical_attack(actor, target, random_factor, events)

    def _retarget(self, intended: ActorId) -> ActorId | None:
        """
        Redirects an action aimed at a fallen combatant to the first living
        member of the same side.
        """
        if self.is_alive(intended):
            return intended
        return self.first_living(intended.side)

    # ============================================================================
    # ACTION RESOLUTION
    # ============================================================================

    def _physical_attack(
        self,
        attacker: ActorId,
        target: ActorId,
        random_factor: float,
        events: list[TurnResult],
    ) -> None:
        damage = calculate_physical_damage(
            self.effective_attack(attacker),
            self.effective_defense(target),
            random_factor,
        )
        self.stats_of(target).take_damage(damage)
        events.append(AttackEvent(attacker=attacker, target=target, damage=damage))
        self._after_hit(target, events)

    def _after_hit(self, target: ActorId, events: list[TurnResult]) -> None:
        """Wakes a sleeping target up, then reports its defeat if it fell."""
        for ailment in self.effects_of(target).on_damage():
            events.append(AilmentCuredEvent(target=target, ailment=ailment))
        self._check_defeated(target, events)

    def _check_defeated(self, target: ActorId, events: list[TurnResult]) -> None:
        if self.is_alive(target):
            return
        self.effects_of(target).clear()
        events.append(DefeatedEvent(target=target))

    def _spell_targets(
        self,
        caster: ActorId,
        spell: SpellKind,
        intended: ActorId | None,
    ) -> list[ActorId]:
        """
        Resolves the combatants a spell lands on at the moment it is cast.

        Enemy healing always lands on the caster. Single-target spells follow
        the retargeting rule, area spells hit every living member of the side.
        """
        if caster.is_enemy() and spell.effect == SpellEffect.HEAL:
            return [caster]
        side = spell.target_shape.target_side(caster.side)
        if not spell.target_shape.is_single():
            return self.living_members(side)
        if intended is not None:
            target = self._retarget(intended)
        else:
            target = self.first_living(side)
        return [target] if target else []

    def _cast_spell(
        self,
        caster: ActorId,
        spell: SpellKind,
        intended: ActorId | None,
        random_factor: float,
        ailment_random: float,
        events: list[TurnResult],
    ) -> None:
        targets = self._spell_targets(caster, spell, intended)
        if not targets:
            log_debug("No living target for spell", {"caster": str(caster), "spell": spell})
            return
        if not self.stats_of(caster).use_mp(spell.mp_cost):
            log_debug(
                "Not enough MP to cast",
                {"caster": str(caster), "spell": spell, "mp": self.stats_of(caster).mp},
            )
            return
        for target in targets:
            self._apply_spell(caster, spell, target, random_factor, ailment_random, events)

    def _apply_spell(
        self,
        caster: ActorId,
        spell: SpellKind,
        target: ActorId,
        random_factor: float,
        ailment_random: float,
        events: list[TurnResult],
    ) -> None:
        effect = spell.effect
        if effect == SpellEffect.DAMAGE:
            damage = calculate_spell_damage(
                spell.power, self.effective_defense(target), random_factor
            )
            self.stats_of(target).take_damage(damage)
            events.append(
                SpellDamageEvent(caster=caster, spell=spell, target=target, damage=damage)
            )
            self._after_hit(target, events)
        elif effect == SpellEffect.HEAL:
            amount = calculate_heal_amount(spell.power, random_factor)
            self.stats_of(target).heal(amount)
            events.append(HealedEvent(caster=caster, spell=spell, target=target, amount=amount))
        elif effect in _BUFF_STATS:
            stat = _BUFF_STATS[effect]
            self.effects_of(target).apply_buff(stat, spell.power)
            events.append(
                BuffedEvent(
                    caster=caster, spell=spell, target=target, stat=stat, amount=spell.power
                )
            )
        elif effect == SpellEffect.MP_DRAIN:
            amount = calculate_mp_drain(spell.power, random_factor)
            self.stats_of(target).drain_mp(amount)
            events.append(
                MpDrainedEvent(caster=caster, spell=spell, target=target, amount=amount)
            )
        elif effect == SpellEffect.AILMENT:
            self._apply_ailment(caster, spell, target, ailment_random, events)

    def _apply_ailment(
        self,
        caster: ActorId,
        spell: SpellKind,
        target: ActorId,
        ailment_random: float,
        events: list[TurnResult],
    ) -> None:
        ailment = spell.ailment
        if ailment is None or not calculate_ailment_success(spell.power, ailment_random):
            events.append(AilmentResistedEvent(caster=caster, spell=spell, target=target))
            return
        self.effects_of(target).inflict(ailment)
        events.append(
            AilmentInflictedEvent(caster=caster, spell=spell, target=target, ailment=ailment)
        )

    def _use_item(
        self,
        user: ActorId,
        item: ItemKind,
        intended: ActorId,
        random_factor: float,
        events: list[TurnResult],
    ) -> None:
        if not item.is_usable_in_battle():
            log_debug("Item has no effect in battle", {"user": str(user), "item": item})
            return
        target = self._retarget(intended)
        if target is None:
            return
        if not self.party[user.index].inventory.use_item(item):
            log_debug("Item not in inventory", {"user": str(user), "item": item})
            return
        amount = calculate_heal_amount(item.heal_power, random_factor)
        self.stats_of(target).heal(amount)
        events.append(ItemUsedEvent(user=user, item=item, target=target, amount=amount))

    # ============================================================================
    # TURN END
    # ============================================================================

    def _decay_buffs(self, events: list[TurnResult]) -> None:
        """Counts every buff down, party first, reporting the expired ones."""
        for side, trackers in ((Side.PARTY, self.party_effects), (Side.ENEMY, self.enemy_effects)):
            for index, effects in enumerate(trackers):
                for stat in effects.decay_buffs():
                    events.append(
                        BuffExpiredEvent(target=ActorId(side=side, index=index), stat=stat)
                    )

    def _tick_poison(self, events: list[TurnResult]) -> None:
        """Deals the fixed poison damage to every poisoned living combatant."""
        for side in (Side.PARTY, Side.ENEMY):
            for actor in self.living_members(side):
                if not self.effects_of(actor).has_ailment(Ailment.POISON):
                    continue
                self.stats_of(actor).take_damage(POISON_DAMAGE)
                events.append(PoisonDamageEvent(target=actor, damage=POISON_DAMAGE))
                self._check_defeated(actor, events)
