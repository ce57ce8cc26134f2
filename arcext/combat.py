"""Dispatches raw combat events to one overridable method per event kind."""

from __future__ import annotations

import logging
from typing import Any

from arcext.sequencer import EventSequencer
from arcext.structs import Agent, CbtStateChange, CombatEvent, WeaponSet

_UINT32 = 0xFFFFFFFF
_UINT8 = 0xFF
_BUFF_INITIAL_MARKER = 18

_logger = logging.getLogger(__name__)


def _weapon_set(value: int) -> WeaponSet | int:
    try:
        return WeaponSet(value)
    except ValueError:
        return value


class CombatEventHandler:
    """Receives combat events in id order and calls the matching hook.

    Every hook only logs its own name by default; subclasses override the
    hooks they care about.  ``last_event_time`` holds the time of the event
    that is being handled.
    """

    def __init__(self) -> None:
        self.last_event_time = 0
        self._sequencer = EventSequencer(self._on_sequenced)

    def event(
        self,
        event: CombatEvent | None,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
        revision: int = 1,
    ) -> None:
        """Hand one event to the sequencer."""
        self._sequencer.process_event(
            event, source, destination, skillname, event_id, revision
        )

    def events_pending(self) -> bool:
        """Whether events are still waiting to be handled."""
        return self._sequencer.events_pending()

    def reset(self) -> None:
        """Drop all pending events and restart sequencing."""
        self._sequencer.reset()

    def close(self) -> None:
        """Stop the background delivery."""
        self._sequencer.close()

    def _on_sequenced(
        self,
        event: CombatEvent | None,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
        revision: int,
    ) -> int:
        self._dispatch(event, source, destination, skillname, event_id)
        return 0

    def _dispatch(
        self,
        event: CombatEvent | None,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
    ) -> None:
        self.log(f"pId: {event_id}")
        if event is None:
            self._tracking_change(source, destination)
            return

        self.last_event_time = event.time
        time = self.last_event_time

        if event.is_statechange:
            self._state_change(time, event, source, destination, skillname, event_id)
        elif event.is_activation:
            self.activation(time, event, source, destination, skillname, event_id)
        elif event.is_buffremove:
            self.buff_remove(
                time, event, source, destination, skillname, event_id, event.pad_value()
            )
        elif event.buff:
            self._buff_event(event, source, destination, skillname, event_id)
        else:
            self.strike(time, event, source, destination, skillname, event_id)

    def _state_change(
        self,
        time: int,
        event: CombatEvent,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
    ) -> None:
        change = event.is_statechange
        if change == CbtStateChange.ENTER_COMBAT:
            self.enter_combat(time, event.src_agent, event.dst_agent & _UINT8, source)
        elif change == CbtStateChange.EXIT_COMBAT:
            self.exit_combat(time, event.src_agent, source)
        elif change == CbtStateChange.CHANGE_UP:
            self.change_up(time, event.src_agent, source)
        elif change == CbtStateChange.CHANGE_DEAD:
            self.change_dead(time, event.src_agent, source)
        elif change == CbtStateChange.CHANGE_DOWN:
            self.change_down(time, event.src_agent, source)
        elif change == CbtStateChange.LOG_START:
            self.log_start(
                time, event.value & _UINT32, event.buff_dmg & _UINT32, event.src_agent
            )
        elif change == CbtStateChange.LOG_END:
            self.log_end(
                time, event.value & _UINT32, event.buff_dmg & _UINT32, event.src_agent
            )
        elif change == CbtStateChange.WEAPON_SWAP:
            self.weapon_swap(time, event.src_agent, _weapon_set(event.dst_agent), source)
        elif change == CbtStateChange.REWARD:
            self.reward(time, event.src_agent, event.dst_agent, event.value)
        elif change == CbtStateChange.BUFF_INITIAL:
            if event.buff == _BUFF_INITIAL_MARKER:
                self.buff_initial(
                    time, event, source, destination, skillname, event_id, event.pad_value()
                )
            else:
                self._buff_event(event, source, destination, skillname, event_id)
        elif change == CbtStateChange.TEAM_CHANGE:
            self.team_change(time, event.src_agent, event.dst_agent, source)
        elif change == CbtStateChange.STACK_ACTIVE:
            self.stack_active(time, event.src_agent, event.dst_agent, source)
        elif change == CbtStateChange.STACK_RESET:
            self.stack_reset(time, event.src_agent, event.value, event.pad_value(), source)
        elif change == CbtStateChange.STAT_RESET:
            self.stat_reset(time)
        elif change == CbtStateChange.EXTENSION:
            self.extension(time, event, source, destination, skillname, event_id)
        elif change == CbtStateChange.API_DELAYED:
            self.delayed(time, event, source, destination, skillname, event_id)
        elif change == CbtStateChange.INSTANCE_START:
            self.instance_start(time, event.src_agent)
        elif change == CbtStateChange.TICKRATE:
            self.tickrate(time, event.src_agent)
        elif change == CbtStateChange.LAST90_BEFORE_DOWN:
            self.last90_before_down(time, event.src_agent, event.dst_agent)
        elif change == CbtStateChange.LOG_NPC_UPDATE:
            self.log_npc_update(
                time, event.value & _UINT32, event.buff_dmg & _UINT32, event.src_agent
            )

    def _tracking_change(self, source: Agent | None, destination: Agent | None) -> None:
        if source is None:
            return
        if not source.elite:
            if not source.name or destination is None or not destination.name:
                return
            account_name = destination.name
            if account_name.startswith(":"):
                account_name = account_name[1:]
            if source.prof:
                self.agent_added(
                    account_name,
                    source.name,
                    source.id,
                    destination.id,
                    destination.prof,
                    destination.elite,
                    bool(destination.is_self),
                    source.team,
                    destination.team & _UINT8,
                )
            else:
                self.agent_removed(
                    account_name, source.name, source.id, bool(destination.is_self)
                )
        elif source.elite == 1:
            self.target_change(source.id)

    def _buff_event(
        self,
        event: CombatEvent,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
    ) -> None:
        time = self.last_event_time
        if event.buff_dmg:
            self.buff_damage(time, event, source, destination, skillname, event_id)
        else:
            self.buff_apply(
                time, event, source, destination, skillname, event_id, event.pad_value()
            )

    # Hooks -----------------------------------------------------------------

    def agent_added(
        self,
        account_name: str,
        character_name: str,
        agent_id: int,
        instance_id: int,
        profession: int,
        elite: int,
        is_self: bool,
        team: int,
        subgroup: int,
    ) -> None:
        """An agent was added to tracking."""
        self.log("AgentAdded")

    def agent_removed(
        self, account_name: str, character_name: str, agent_id: int, is_self: bool
    ) -> None:
        """An agent was removed from tracking."""
        self.log("AgentRemoved")

    def target_change(self, agent_id: int) -> None:
        """The local player targeted another agent."""
        self.log("TargetChange")

    def enter_combat(self, time: int, agent_id: int, subgroup: int, agent: Agent | None) -> None:
        """An agent entered combat."""
        self.log("EnterCombat")

    def exit_combat(self, time: int, agent_id: int, agent: Agent | None) -> None:
        """An agent left combat."""
        self.log("ExitCombat")

    def change_up(self, time: int, agent_id: int, agent: Agent | None) -> None:
        """An agent is alive again."""
        self.log("ChangeUp")

    def change_dead(self, time: int, agent_id: int, agent: Agent | None) -> None:
        """An agent died."""
        self.log("ChangeDead")

    def change_down(self, time: int, agent_id: int, agent: Agent | None) -> None:
        """An agent went down."""
        self.log("ChangeDown")

    def log_start(self, time: int, server_time: int, local_time: int, species_id: int) -> None:
        """A log started."""
        self.log("LogStart")

    def log_end(self, time: int, server_time: int, local_time: int, species_id: int) -> None:
        """A log ended."""
        self.log("LogEnd")

    def log_npc_update(
        self, time: int, server_time: int, local_time: int, species_id: int
    ) -> None:
        """The npc a log is for changed."""
        self.log("LogNpcUpdate")

    def weapon_swap(self, time: int, agent_id: int, weapon_set: Any, agent: Agent | None) -> None:
        """An agent swapped weapon set."""
        self.log("WeaponSwap")

    def reward(self, time: int, self_id: int, reward_id: int, reward_type: int) -> None:
        """The local player received a reward."""
        self.log("Reward")

    def team_change(self, time: int, agent_id: int, new_team: int, agent: Agent | None) -> None:
        """An agent changed team."""
        self.log("TeamChange")

    def stack_active(self, time: int, agent_id: int, stack_id: int, agent: Agent | None) -> None:
        """A buff stack became active."""
        self.log("StackActive")

    def stack_reset(
        self, time: int, agent_id: int, duration: int, stack_id: int, agent: Agent | None
    ) -> None:
        """A buff stack was reset to a duration and made inactive."""
        name = agent.name if agent is not None else None
        self.log(f"StackReset|agentName {name}|duration {duration}|stackId {stack_id}")

    def stat_reset(self, time: int) -> None:
        """All stats were reset."""
        self.log("StatReset")

    def extension(
        self,
        time: int,
        event: CombatEvent,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
    ) -> None:
        """An event sent by another extension."""
        self.log("Extension")

    def delayed(
        self,
        time: int,
        event: CombatEvent,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
    ) -> None:
        """An event that was delayed on purpose."""
        self.log("Delayed")

    def instance_start(self, time: int, start_time: int) -> None:
        """Roughly when the server started the instance."""
        self.log("InstanceStart")

    def tickrate(self, time: int, data: int) -> None:
        """Periodic tickrate report."""
        self.log("Tickrate")

    def last90_before_down(self, time: int, enemy_agent: int, since_time: int) -> None:
        """Time since an enemy that went down was last at 90%."""
        self.log("Last90BeforeDown")

    def activation(
        self,
        time: int,
        event: CombatEvent,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
    ) -> None:
        """A skill activation."""
        self.log("Activation")

    def buff_remove(
        self,
        time: int,
        event: CombatEvent,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
        stack_id: int,
    ) -> None:
        """A buff stack was removed."""
        self.log("BuffRemove")

    def buff_damage(
        self,
        time: int,
        event: CombatEvent,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
    ) -> None:
        """Damage dealt by a buff."""
        self.log("BuffDamage")

    def buff_apply(
        self,
        time: int,
        event: CombatEvent,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
        stack_id: int,
    ) -> None:
        """A buff stack was applied."""
        self.log("BuffApply")

    def strike(
        self,
        time: int,
        event: CombatEvent,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
    ) -> None:
        """A direct hit."""
        self.log("Strike")

    def buff_initial(
        self,
        time: int,
        event: CombatEvent,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
        stack_id: int,
    ) -> None:
        """A buff present when the log started."""
        self.log("BuffInitial")

    def log(self, text: str) -> None:
        """Receive diagnostic text; sent to the module logger at debug level."""
        _logger.debug("%s", text)