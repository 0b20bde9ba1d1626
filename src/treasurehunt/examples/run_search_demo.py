from treasurehunt.config import load_config
from treasurehunt.engine.sim_runner import run_search


def main():
    config = load_config()
    config.seed = 948464
    config.evolution.generations = 200
    config.outputs.progress_interval = 50
    run_search(config)


if __name__ == "__main__":
    main()
