"""FitQuest planning core - weekly plan generation and progression formulas."""

from loguru import logger

# Library logging stays silent until an application calls setup_logger
logger.disable("fitquest")
