# main.py
"""
Main entry point for the Particle Trails simulation.

This script orchestrates the entire simulation lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Opens the window, then sizes the simulation to it.
4. Runs the input -> step -> draw loop.
5. Handles clean shutdown.
"""
import logging
import cProfile
import pstats
import io

from utils import setup_logging, load_config


def main(config_path: str = 'config.json'):
    """
    The main function to run the simulation.
    """
    # Logging is not set up yet, so a config failure is reported with print.
    try:
        config = load_config(config_path)
    except Exception as e:
        print(f"FATAL: Could not load {config_path}. Error: {e}")
        return

    setup_logging(config)

    logging.info("--- Particle Trails Simulation Starting ---")

    sim_params = config.get('simulation_parameters', {})
    run_params = config.get('run_control', {})
    vis_params = config.get('visualization', {})

    from simulation import Simulation
    from controls import InputController
    from visualization import Visualizer

    # The visualizer decides the viewport, so it is created first.
    visualizer = Visualizer(vis_params)
    sim = Simulation(sim_params, visualizer.sim_width, visualizer.sim_height)
    controller = InputController(sim)

    log_throttle = run_params.get('log_throttle_steps', 300)
    max_steps = run_params.get('max_steps', 0)
    profiler = cProfile.Profile() if run_params.get('profile', False) else None

    step_num = 0
    if profiler is not None:
        profiler.enable()
    try:
        while visualizer.process_input(controller):
            sim.step()
            visualizer.draw(sim)
            step_num += 1

            if step_num % log_throttle == 0:
                logging.info(f"Step {step_num} | Particles: {len(sim.particles)}")
                logging.debug(f"Step {step_num} | Mean speed: {sim.mean_speed():.4f}")

            if max_steps and step_num >= max_steps:
                logging.info(f"Reached max_steps ({max_steps}). Stopping simulation.")
                break
    finally:
        if profiler is not None:
            profiler.disable()
        visualizer.close()

    logging.info(f"Simulation loop finished after {step_num} steps.")

    if profiler is not None:
        logging.info("--- Performance Profile ---")
        s = io.StringIO()
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logging.info(f"\n{s.getvalue()}")

    logging.info("--- Particle Trails Simulation Shutting Down ---")


if __name__ == "__main__":
    main()
