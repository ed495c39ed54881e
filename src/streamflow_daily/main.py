"""
Main entry point for the ensemble daily flow aggregation engine.

Reads a forecast response document, reduces each configured horizon to daily
summaries and reports them.
"""

import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .core import Config, setup_logger, LoggerContext
from .models import DailyForecastCollection, ForecastResponse
from .processor import DailyForecastProcessor


class DailyForecastApp:
    """Command line application for daily forecast processing."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)

        self.logger = setup_logger(
            log_file=self.config.log_file,
            log_level=self.config.log_level
        )
        self.logger.info("=" * 60)
        self.logger.info("Ensemble Daily Flow Aggregation")
        self.logger.info("=" * 60)
        self.logger.info(f"Configuration: {self.config}")

        self.processor = DailyForecastProcessor(
            timezone=self.config.timezone,
            unit_context=self.config.unit_context,
            logger=self.logger
        )

    def load_forecast(self, input_file: str) -> ForecastResponse:
        """
        Load a forecast response document.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the document is malformed
        """
        input_path = Path(input_file)
        if not input_path.exists():
            raise FileNotFoundError(f"Forecast file not found: {input_file}")

        with open(input_path, "r", encoding="utf-8") as f:
            return ForecastResponse.from_json(json.load(f))

    def run(
        self,
        input_file: str,
        horizons: Optional[List[str]] = None
    ) -> Dict[str, DailyForecastCollection]:
        """
        Process every requested horizon of a forecast document.

        Args:
            input_file: Path to the forecast response JSON
            horizons: Horizons to process. Defaults to the configured horizons

        Returns:
            Horizon -> daily forecast collection
        """
        response = self.load_forecast(input_file)
        self.logger.info(
            f"Loaded forecast for reach {response.reach.reach_id} ({response.reach.display_name})"
        )

        results: Dict[str, DailyForecastCollection] = {}
        # One snapshot of the unit preference for the whole run
        unit_context = self.config.unit_context

        for horizon in horizons or self.config.horizons:
            with LoggerContext(self.logger, f"{horizon} processing"):
                collection = self.processor.process_forecast_data(
                    forecast_data=response.ensemble(horizon),
                    reach=response.reach,
                    forecast_type=horizon,
                    unit_context=unit_context,
                )

            self.processor.summarize(collection)
            if not collection.is_empty:
                self.processor.validator.validate_processed_data(collection.forecasts)
            results[horizon] = collection

        return results


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Ensemble Daily Flow Aggregation"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="Path to forecast response JSON"
    )
    parser.add_argument(
        "--horizon",
        type=str,
        action="append",
        default=None,
        help="Horizon to process (medium_range, long_range). Repeatable. Default: from config"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print daily forecasts as JSON"
    )

    args = parser.parse_args()

    app = None
    try:
        app = DailyForecastApp(config_file=args.config)
        results = app.run(args.input, horizons=args.horizon)
    except Exception as e:
        if app is None:
            # Logging is not configured before the app exists
            print(f"Application failed: {e}", file=sys.stderr)
        else:
            app.logger.error(f"Application failed: {e}", exc_info=True)
        sys.exit(1)

    if args.json:
        print(json.dumps(
            {horizon: collection.to_dict() for horizon, collection in results.items()},
            indent=2
        ))


if __name__ == "__main__":
    main()
