"""
Main entry point for the turn resolver.

Runs a sample encounter between the default party and a random enemy group,
choosing simple commands for the party and printing every event of every
turn. All randomness comes from a seeded generator, so the same seed always
replays the same battle.
"""

import argparse
import logging
import random

from actions.base_action import AttackAction, BaseAction, SpellAction, UseItemAction
from actions.spells.base_spell import SpellKind
from character.enemy import generate_enemy_group
from character.party_member import PartyMember, default_party
from combat.combat_manager import BattleState
from combat.random_factors import TurnRandomFactors
from core.actor import ActorId
from core.constants import Side, SpellEffect
from core.logging import log_info, setup_logging
from core.utils import cprint, crule, make_bar
from effects.event_system import TurnResult
from items.item import ItemKind


def choose_command(battle: BattleState, index: int) -> BaseAction | None:
    """
    Picks a command for a party member: heal a badly hurt ally, otherwise
    cast the strongest affordable damage spell, otherwise attack.
    """
    member: PartyMember = battle.party[index]
    if not member.is_alive():
        return None
    target = battle.first_living(Side.ENEMY)
    if target is None:
        return None

    spells = [s for s in member.known_spells() if s.mp_cost <= member.stats.mp]
    for ally in battle.living_members(Side.PARTY):
        stats = battle.stats_of(ally)
        if stats.hp * 3 < stats.max_hp:
            heals = [s for s in spells if s.effect == SpellEffect.HEAL]
            if heals:
                return SpellAction(spell=heals[0], target=ally)
            if member.inventory.count(ItemKind.HERB) > 0:
                return UseItemAction(item=ItemKind.HERB, target=ally)

    damage = [s for s in spells if s.effect == SpellEffect.DAMAGE]
    if damage:
        strongest = max(damage, key=lambda s: s.power)
        return SpellAction(spell=strongest, target=target)
    return AttackAction(target=target)


def print_status(battle: BattleState) -> None:
    for side, roster in ((Side.PARTY, battle.party), (Side.ENEMY, battle.enemies)):
        for index, combatant in enumerate(roster):
            stats = combatant.stats
            actor = ActorId(side=side, index=index)
            effects = battle.effects_of(actor)
            status = " ".join(
                f"{ailment.emoji} {ailment.colored_name}"
                for ailment in sorted(effects.ailments, key=lambda a: a.name)
            )
            status += "".join(f" <{buff}>" for buff in effects.buffs.values())
            cprint(
                f"    {side.emoji} {side.colorize(f'{combatant.name:<10}')} "
                f"{str(actor):<10} "
                f"HP {make_bar(stats.hp, stats.max_hp, color='red')} {stats.hp:3}/{stats.max_hp:<3} "
                f"MP {make_bar(stats.mp, stats.max_mp, color='blue')} {stats.mp:3}/{stats.max_mp:<3} "
                f"{status}"
            )


def format_event(event: TurnResult) -> str:
    """Colors spell events by the effect of their spell."""
    spell = getattr(event, "spell", None)
    if isinstance(spell, SpellKind):
        return spell.effect.colorize(str(event))
    return str(event)


def run(seed: int, max_turns: int, tier: int) -> BattleState:
    """
    Plays a battle until it is over or the turn limit is reached.

    Args:
        seed (int): Seed of the random generator.
        max_turns (int): Maximum number of turns to play.
        tier (int): Tier of the generated enemy group.

    Returns:
        BattleState: The battle at the end of the run.

    """
    rng = random.Random(seed)
    party = default_party()
    for member in party:
        member.inventory.add(ItemKind.HERB, 2)
    enemies = generate_enemy_group(rng.random(), rng.random(), tier=tier)
    battle = BattleState(party, enemies)
    log_info(
        "Encounter generated",
        {"seed": seed, "tier": tier, "enemies": [enemy.name for enemy in enemies]},
    )

    crule("Encounter", style="bold green")
    print_status(battle)

    while not battle.is_over() and battle.turn_number < max_turns:
        commands = [choose_command(battle, index) for index in range(len(battle.party))]
        factors = TurnRandomFactors.roll(len(battle.party), len(battle.enemies), rng)
        events = battle.execute_turn(commands, factors)
        crule(f"Turn {battle.turn_number}", style="bold yellow")
        for event in events:
            cprint(f"    {format_event(event)}")
        print_status(battle)

    crule("Outcome", style="bold green")
    if battle.is_victory():
        cprint(
            f"[bold green]Victory![/] {battle.total_exp_reward()} EXP, "
            f"{battle.total_gold_reward()} gold."
        )
    elif battle.is_party_wiped():
        cprint("[bold red]The party was wiped out.[/]")
    elif battle.has_fled():
        cprint("[bold yellow]The party fled.[/]")
    else:
        cprint(f"[dim white]Stopped after {battle.turn_number} turns.[/]")
    return battle


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a sample battle.")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the battle.")
    parser.add_argument("--turns", type=int, default=30, help="Maximum number of turns.")
    parser.add_argument("--tier", type=int, default=1, help="Tier of the enemy group.")
    parser.add_argument("--verbose", action="store_true", help="Show debug logs.")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    run(args.seed, args.turns, args.tier)


if __name__ == "__main__":
    main()
