"""Point d'entrée en ligne de commande.

C'est la seule frontière qui rapporte les échecs à l'hôte CI et
convertit le bilan du pipeline en code de sortie du processus.
"""

import argparse
from typing import Optional, Sequence

from ros_ci_pipeline.commands import (
    AnsiCommandFormatter,
    CommandFormatter,
    PlainCommandFormatter,
    PlatformCommandExecutor,
    SubprocessRunner,
    detect_shell_strategy,
)
from ros_ci_pipeline.config import (
    PipelineInputs,
    load_inputs_from_env,
    load_pipeline_inputs,
)
from ros_ci_pipeline.dependencies import RosdepInstaller
from ros_ci_pipeline.errors import (
    ConfigurationError,
    ErrorHandlerChain,
    FailureCollector,
    HostErrorHandler,
    LoggerErrorHandler,
)
from ros_ci_pipeline.filesystem import LocalFileManager
from ros_ci_pipeline.host import CIHost, LocalHost, detect_host
from ros_ci_pipeline.logging import FileLogger
from ros_ci_pipeline.pipeline import CoveragePipeline, PipelineDriver
from ros_ci_pipeline.scripts import BashScriptInstaller


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ros-ci-pipeline",
        description="Build, test et couverture d'un workspace ROS / ROS 2.",
    )
    parser.add_argument(
        "--config",
        help="Fichier TOML/JSON contenant une section [pipeline] "
             "(par défaut : variables INPUT_* de l'environnement)",
    )
    parser.add_argument(
        "--dotenv",
        help="Fichier .env complétant les variables INPUT_*",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Affiche les commandes sans les exécuter",
    )
    return parser


def _load_inputs(args: argparse.Namespace) -> PipelineInputs:
    if args.config:
        return load_pipeline_inputs(args.config)
    return load_inputs_from_env(dotenv_path=args.dotenv)


def formatter_for(host: CIHost) -> CommandFormatter:
    """Couleurs ANSI en terminal local, texte brut sur un runner CI."""
    if isinstance(host, LocalHost):
        return AnsiCommandFormatter()
    return PlainCommandFormatter()


def build_driver(
    inputs: PipelineInputs,
    host: CIHost,
    dry_run: bool = False,
) -> PipelineDriver:
    """Assemble le driver et ses collaborateurs pour l'hôte courant."""
    logger = FileLogger.from_settings(inputs.logging)
    strategy = detect_shell_strategy()
    formatter = formatter_for(host)
    runner = SubprocessRunner(
        logger=logger, dry_run=dry_run, formatter=formatter
    )
    executor = PlatformCommandExecutor(
        strategy, runner, host, logger, formatter=formatter
    )
    file_manager = LocalFileManager(logger)
    installer = RosdepInstaller(
        executor, BashScriptInstaller(file_manager, logger), logger
    )
    error_handler = (
        ErrorHandlerChain()
        .add_handler(LoggerErrorHandler(logger))
        .add_handler(HostErrorHandler(host))
    )
    return PipelineDriver(
        inputs,
        executor,
        strategy,
        installer,
        CoveragePipeline(executor),
        file_manager,
        error_handler=error_handler,
        logger=logger,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Exécute le pipeline et retourne le code de sortie."""
    args = build_parser().parse_args(argv)
    host = detect_host()
    failures = FailureCollector()

    try:
        inputs = _load_inputs(args)
    except ConfigurationError as e:
        failures.add(str(e))
        failures.report(host)
        return 2

    report = build_driver(inputs, host, dry_run=args.dry_run).run()
    for message in report.failures:
        failures.add(message)
    failures.report(host)
    return report.exit_code
