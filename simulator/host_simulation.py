"""
Host Simulation

Reference host for the dispatch controller: builds floors and elevators
from SimulationConfig, hands them to the controller and replays scripted
button presses on a SimPy clock.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

import simpy

from config.simulation import CAR_CALL, HALL_CALL, CallEvent, SimulationConfig
from .core.elevator import SimElevator
from .core.floor import SimFloor
from .infrastructure.message_broker import MessageBroker

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Outcome of one simulation run"""
    duration: float
    served_stops: Dict[int, List[int]] = field(default_factory=dict)  # elevator index -> floors stopped at
    outstanding_calls: List[int] = field(default_factory=list)  # floors with a lit hall button
    messages_published: int = 0

    @property
    def total_stops(self) -> int:
        return sum(len(stops) for stops in self.served_stops.values())


class HostSimulation:
    """
    Drives a controller through one simulated run

    The controller is any object with init(elevators, floors) and
    update(dt, elevators, floors), such as group_control.Bootstrap.
    init() is called once before the clock starts, so the initial idle
    announcement of every elevator already reaches the controller.
    """

    def __init__(self, config: SimulationConfig, controller):
        self.config = config
        self.controller = controller

        self.env = simpy.Environment()
        self.broker = MessageBroker(self.env)

        num_floors = config.building.num_floors
        self.floors = [SimFloor(self.env, floor, num_floors, self.broker) for floor in range(num_floors)]

        elevator_config = config.elevator
        self.elevators = [
            SimElevator(
                self.env, f"Elevator_{index + 1}", self.broker, num_floors,
                start_floor=elevator_config.get_start_floor(index),
                max_capacity=elevator_config.max_capacity,
                seconds_per_floor=elevator_config.seconds_per_floor,
                stop_dwell_time=elevator_config.stop_dwell_time,
                idle_interval=elevator_config.idle_interval
            )
            for index in range(elevator_config.num_elevators)
        ]

        for elevator in self.elevators:
            elevator.on("stopped_at_floor", self._make_arrival_handler(elevator))

        self._started = False

    def _make_arrival_handler(self, elevator: SimElevator):
        def on_stopped(floor: int):
            self.floors[floor].serve(elevator.name)
        return on_stopped

    def run(self) -> SimulationResult:
        """
        Run the simulation until traffic.simulation_duration

        Raises:
            RuntimeError: If the simulation has already been run
        """
        if self._started:
            raise RuntimeError("HostSimulation can only be run once")
        self._started = True

        duration = self.config.traffic.simulation_duration
        logger.info("--- Simulation Setup: %d floors, %d elevators, %.1fs ---",
                    len(self.floors), len(self.elevators), duration)

        self.controller.init(self.elevators, self.floors)

        for elevator in self.elevators:
            self.env.process(elevator.run())
        self.env.process(self._tick())
        self.env.process(self._traffic())

        self.env.run(until=duration)
        logger.info("--- Simulation End at %.2f ---", self.env.now)

        return SimulationResult(
            duration=duration,
            served_stops={index: list(elevator.served_floors) for index, elevator in enumerate(self.elevators)},
            outstanding_calls=[floor.floor_num() for floor in self.floors if floor.has_call],
            messages_published=self.broker.published_count
        )

    def _tick(self):
        """Hand the controller a fresh view of the fleet every tick_interval"""
        dt = self.config.traffic.tick_interval
        while True:
            yield self.env.timeout(dt)
            self.controller.update(dt, self.elevators, self.floors)

    def _traffic(self):
        """Replay the scripted button presses in time order"""
        for call in sorted(self.config.traffic.calls, key=lambda c: c.time):
            if call.time > self.env.now:
                yield self.env.timeout(call.time - self.env.now)
            self._apply(call)

    def _apply(self, call: CallEvent):
        if call.type == HALL_CALL:
            floor = self.floors[call.floor]
            if call.direction == "up":
                floor.press_up()
            else:
                floor.press_down()
        elif call.type == CAR_CALL:
            self.elevators[call.elevator].press_floor_button(call.floor)
