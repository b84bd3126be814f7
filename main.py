import logging
import sys

# Configuration
from config import load_group_control_config, load_simulation_config

# Controller
from group_control import Bootstrap, build_controller

# Reference host
from simulator.host_simulation import HostSimulation

logger = logging.getLogger("elvdispatch")


def run_simulation(sim_config_path="scenarios/simulation/five_floor_single_car.yaml",
                   gc_config_path="scenarios/group_control/nearest_request.yaml"):
    """
    Set up and run the entire simulation

    Args:
        sim_config_path: Path to simulation configuration YAML file
        gc_config_path: Path to group control configuration YAML file

    Returns:
        SimulationResult of the run
    """
    # Load configurations
    sim_config = load_simulation_config(sim_config_path)
    gc_config = load_group_control_config(gc_config_path)

    logging.basicConfig(
        level=getattr(logging, sim_config.log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s"
    )
    logger.info("--- Loading Configuration ---")
    logger.info("Simulation Config: %s", sim_config_path)
    logger.info("Group Control Config: %s", gc_config_path)

    controller = build_controller(gc_config)
    bootstrap = Bootstrap(controller)

    simulation = HostSimulation(sim_config, bootstrap)
    result = simulation.run()

    logger.info("--- Summary ---")
    for index, stops in result.served_stops.items():
        logger.info("Elevator %d stops: %s", index, stops)
    logger.info("Total stops: %d", result.total_stops)
    logger.info("Hall calls still lit: %s", result.outstanding_calls)
    logger.info("Calls pending in controller: %s", controller.pending.floors())
    logger.info("Messages published: %d", result.messages_published)
    return result


if __name__ == '__main__':
    # Accept command line arguments for config files
    sim_config_path = sys.argv[1] if len(sys.argv) > 1 else "scenarios/simulation/five_floor_single_car.yaml"
    gc_config_path = sys.argv[2] if len(sys.argv) > 2 else "scenarios/group_control/nearest_request.yaml"
    run_simulation(sim_config_path=sim_config_path, gc_config_path=gc_config_path)
