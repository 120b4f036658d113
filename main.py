"""
Main entrypoint: run the evaluation harness once with settings from env / .env.

Configure logging before other imports that may log. Env: EVAL_MODEL_PATH,
EVAL_ENGINE, EVAL_DATASET_PATH, EVAL_TRIGGER, EVAL_OUTPUT_IMAGE, LOG_LEVEL, etc.

Same as: python -m tinyml_eval.tools.run_evaluation
"""

import sys

from tinyml_eval.eval_logging import get_logger

logger = get_logger("main")


def main() -> int:
    from tinyml_eval.tools.run_evaluation import main as run_main

    logger.info("main_starting")
    return run_main()


if __name__ == "__main__":
    sys.exit(main())
