"""
Simulation Configuration

This configuration is used only by the reference host simulation.
Contains the building layout, elevator timings and the scripted traffic.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


HALL_CALL = "hall_call"
CAR_CALL = "car_call"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _section(data: Optional[dict], key: str) -> dict:
    """Sub-mapping at key; a missing or empty (null) section reads as {}"""
    value = (data or {}).get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' section must be a mapping")
    return value


@dataclass
class BuildingConfig:
    """Building specifications"""
    num_floors: int = 5

    def __post_init__(self):
        if self.num_floors < 2:
            raise ValueError("num_floors must be at least 2")


@dataclass
class ElevatorConfig:
    """Elevator specifications"""
    num_elevators: int = 1
    max_capacity: int = 10  # persons
    seconds_per_floor: float = 1.5
    stop_dwell_time: float = 3.0  # seconds spent at each stop
    idle_interval: float = 1.0  # seconds between repeated idle announcements (0 = announce once)
    start_floors: Optional[List[int]] = None  # Per-elevator start floor (None = all at floor 0)

    def __post_init__(self):
        if self.num_elevators < 1:
            raise ValueError("num_elevators must be at least 1")
        if self.max_capacity < 1:
            raise ValueError("max_capacity must be at least 1")
        if self.seconds_per_floor <= 0:
            raise ValueError("seconds_per_floor must be positive")
        if self.stop_dwell_time < 0:
            raise ValueError("stop_dwell_time cannot be negative")
        if self.idle_interval < 0:
            raise ValueError("idle_interval cannot be negative")

        if self.start_floors is not None:
            if len(self.start_floors) != self.num_elevators:
                raise ValueError(f"start_floors list length ({len(self.start_floors)}) must match num_elevators ({self.num_elevators})")

    def get_start_floor(self, index: int) -> int:
        if self.start_floors is None:
            return 0
        return self.start_floors[index]


@dataclass
class CallEvent:
    """
    One scripted button press

    Attributes:
        time: Simulation time of the press
        type: 'hall_call' (floor button) or 'car_call' (cabin button)
        floor: Floor of the hall call, or destination of the car call
        direction: 'up' or 'down' (hall calls only)
        elevator: Elevator index (car calls only)
    """
    time: float
    type: str
    floor: int
    direction: Optional[str] = None
    elevator: Optional[int] = None

    def __post_init__(self):
        if self.time < 0:
            raise ValueError("call time cannot be negative")
        if self.type == HALL_CALL:
            if self.direction not in ("up", "down"):
                raise ValueError(f"hall_call direction must be 'up' or 'down', got '{self.direction}'")
        elif self.type == CAR_CALL:
            if self.elevator is None:
                raise ValueError("car_call requires an elevator index")
        else:
            raise ValueError(f"Unknown call type: {self.type}")

    @classmethod
    def from_dict(cls, data: dict) -> 'CallEvent':
        if not isinstance(data, dict):
            raise ValueError(f"call entry must be a mapping, got {data!r}")
        return cls(
            time=float(data.get('time', 0.0)),
            type=data.get('type', HALL_CALL),
            floor=data['floor'],
            direction=data.get('direction'),
            elevator=data.get('elevator')
        )

    def to_dict(self) -> dict:
        result = {'time': self.time, 'type': self.type, 'floor': self.floor}
        if self.direction is not None:
            result['direction'] = self.direction
        if self.elevator is not None:
            result['elevator'] = self.elevator
        return result


@dataclass
class TrafficConfig:
    """Traffic and clock configuration"""
    simulation_duration: float = 120.0  # seconds
    tick_interval: float = 0.5  # seconds between controller updates
    calls: List[CallEvent] = field(default_factory=list)

    def __post_init__(self):
        if self.simulation_duration <= 0:
            raise ValueError("simulation_duration must be positive")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive")


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines building, elevator and traffic settings.
    """
    building: BuildingConfig
    elevator: ElevatorConfig
    traffic: TrafficConfig

    log_level: str = "INFO"

    def __post_init__(self):
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = _section(data, 'simulation') if 'simulation' in (data or {}) else (data or {})

        building_data = _section(sim_data, 'building')
        building = BuildingConfig(
            num_floors=building_data.get('num_floors', 5)
        )

        elevator_data = _section(sim_data, 'elevator')
        elevator = ElevatorConfig(
            num_elevators=elevator_data.get('num_elevators', 1),
            max_capacity=elevator_data.get('max_capacity', 10),
            seconds_per_floor=elevator_data.get('seconds_per_floor', 1.5),
            stop_dwell_time=elevator_data.get('stop_dwell_time', 3.0),
            idle_interval=elevator_data.get('idle_interval', 1.0),
            start_floors=elevator_data.get('start_floors')
        )

        traffic_data = _section(sim_data, 'traffic')
        traffic = TrafficConfig(
            simulation_duration=traffic_data.get('simulation_duration', 120.0),
            tick_interval=traffic_data.get('tick_interval', 0.5),
            calls=[CallEvent.from_dict(call) for call in traffic_data.get('calls') or []]
        )

        return cls(
            building=building,
            elevator=elevator,
            traffic=traffic,
            log_level=sim_data.get('log_level', 'INFO')
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        elevator: Dict[str, Any] = {
            'num_elevators': self.elevator.num_elevators,
            'max_capacity': self.elevator.max_capacity,
            'seconds_per_floor': self.elevator.seconds_per_floor,
            'stop_dwell_time': self.elevator.stop_dwell_time,
            'idle_interval': self.elevator.idle_interval
        }
        if self.elevator.start_floors is not None:
            elevator['start_floors'] = list(self.elevator.start_floors)

        return {
            'simulation': {
                'building': {
                    'num_floors': self.building.num_floors
                },
                'elevator': elevator,
                'traffic': {
                    'simulation_duration': self.traffic.simulation_duration,
                    'tick_interval': self.traffic.tick_interval,
                    'calls': [call.to_dict() for call in self.traffic.calls]
                },
                'log_level': self.log_level
            }
        }

    def validate(self):
        """Validate configuration consistency"""
        num_floors = self.building.num_floors

        for index in range(self.elevator.num_elevators):
            start_floor = self.elevator.get_start_floor(index)
            if not (0 <= start_floor < num_floors):
                raise ValueError(f"start floor {start_floor} of elevator {index} must be between 0 and {num_floors - 1}")

        for call in self.traffic.calls:
            if not (0 <= call.floor < num_floors):
                raise ValueError(f"call floor {call.floor} must be between 0 and {num_floors - 1}")
            if call.type == HALL_CALL:
                if call.direction == "up" and call.floor == num_floors - 1:
                    raise ValueError("top floor has no up button")
                if call.direction == "down" and call.floor == 0:
                    raise ValueError("ground floor has no down button")
            if call.type == CAR_CALL and not (0 <= call.elevator < self.elevator.num_elevators):
                raise ValueError(f"car_call elevator {call.elevator} does not exist")
