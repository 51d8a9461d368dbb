"""Domain service for building expiry alert reports."""

from datetime import date, datetime

from ..entities import Driver, ExpiryAlert, ExpiryAlertReport, Vehicle
from .expiry_classifier import ExpiryClassifier


class ExpiryAlertAnalyzer:
    """Domain service for analyzing vehicle and driver document dates."""

    def __init__(self, classifier: ExpiryClassifier) -> None:
        """Initialize analyzer with a classifier."""
        self._classifier = classifier

    def analyze(
        self,
        vehicles: list[Vehicle],
        drivers: list[Driver],
        now: date | datetime,
    ) -> ExpiryAlertReport:
        """
        Classify every document date and collect the ones needing attention.

        Args:
            vehicles: Vehicles to check.
            drivers: Drivers to check.
            now: Evaluation time shared by every classification.

        Returns:
            ExpiryAlertReport with one alert per non-safe document.
        """
        alerts: list[ExpiryAlert] = []

        for vehicle in vehicles:
            for document, value in vehicle.document_dates().items():
                status = self._classifier.classify(value, now)
                if status.requires_attention:
                    alerts.append(ExpiryAlert(
                        subject_type="vehicle",
                        subject_id=vehicle.id,
                        subject_name=vehicle.display_name,
                        document=document,
                        status=status,
                    ))

        for driver in drivers:
            for document, value in driver.document_dates().items():
                status = self._classifier.classify(value, now)
                if status.requires_attention:
                    alerts.append(ExpiryAlert(
                        subject_type="driver",
                        subject_id=driver.id,
                        subject_name=driver.display_name,
                        document=document,
                        status=status,
                    ))

        return ExpiryAlertReport(
            alerts=alerts,
            vehicles_checked=len(vehicles),
            drivers_checked=len(drivers),
        )
