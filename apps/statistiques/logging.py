"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Centralized logging for budgetary statistics operations.
-------------------------------------------------------------------------
"""
import logging
from typing import Any, Dict

logger = logging.getLogger('apps.statistiques')


class StatistiquesLogger:
    """Centralized logging for statistics computations"""

    @staticmethod
    def log_report_computed(report: str, annee: int, record_count: int, context: Dict[str, Any]):
        """Log a successfully computed report"""
        logger.info(
            f"Report computed: {report} | "
            f"Year: {annee} | "
            f"Records: {record_count}",
            extra={**context, 'report': report, 'annee': annee, 'record_count': record_count}
        )

    @staticmethod
    def log_validation_error(operation: str, error: Exception, context: Dict[str, Any]):
        """Log rejected requests (invalid year, amount or dimension)"""
        logger.warning(
            f"Validation error in {operation}: {error}",
            extra={**context, 'validation_error': str(error)}
        )

    @staticmethod
    def log_upstream_failure(operation: str, error: Exception, context: Dict[str, Any]):
        """Log record store failures with the underlying traceback"""
        logger.error(
            f"Upstream failure in {operation}: {error}",
            extra=context,
            exc_info=True
        )
