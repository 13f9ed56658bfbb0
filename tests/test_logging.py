"""Tests pour le module logging."""

from ros_ci_pipeline.config.models import LoggingSettings
from ros_ci_pipeline.logging import FileLogger, Logger


class TestFileLogger:
    """Tests pour FileLogger."""

    def test_implements_logger_interface(self, tmp_path):
        """Vérifie que FileLogger implémente l'interface Logger."""
        logger = FileLogger(str(tmp_path / "test.log"))

        assert isinstance(logger, Logger)

    def test_log_info(self, tmp_path):
        """Test du logging info."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file), console_output=False)

        logger.log_info("Test message")

        content = log_file.read_text()
        assert "INFO" in content
        assert "Test message" in content

    def test_log_warning(self, tmp_path):
        """Test du logging warning."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file), console_output=False)

        logger.log_warning("Warning message")

        content = log_file.read_text()
        assert "WARNING" in content
        assert "Warning message" in content

    def test_log_error(self, tmp_path):
        """Test du logging error."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file), console_output=False)

        logger.log_error("Error message")

        content = log_file.read_text()
        assert "ERROR" in content
        assert "Error message" in content

    def test_niveau_filtre(self, tmp_path):
        """Les messages sous le niveau configuré sont ignorés."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file), level="ERROR",
                            console_output=False)

        logger.log_info("masqué")
        logger.log_error("visible")

        content = log_file.read_text()
        assert "masqué" not in content
        assert "visible" in content

    def test_utf8(self, tmp_path):
        """Les caractères accentués sont écrits en UTF-8."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file), console_output=False)

        logger.log_info("Défauts colcon écrits")

        assert "Défauts colcon écrits" in log_file.read_text(
            encoding="utf-8"
        )

    def test_cree_le_repertoire(self, tmp_path):
        """Le répertoire parent du fichier est créé au besoin."""
        log_file = tmp_path / "logs" / "ci" / "pipeline.log"
        logger = FileLogger(str(log_file), console_output=False)

        logger.log_info("ok")

        assert log_file.exists()

    def test_sans_propagation(self, tmp_path):
        logger = FileLogger(str(tmp_path / "test.log"))
        assert logger.logger.propagate is False

    def test_from_settings(self, tmp_path):
        log_file = tmp_path / "settings.log"
        settings = LoggingSettings(
            level="WARNING", format="%(levelname)s|%(message)s",
            file=str(log_file),
        )

        logger = FileLogger.from_settings(settings)
        logger.log_info("ignoré")
        logger.log_warning("attention")

        assert log_file.read_text() == "WARNING|attention\n"
