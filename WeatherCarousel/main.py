"""Weather carousel: run the aggregator endpoint or the dashboard client."""
import argparse
import logging
import os
import signal
import sys
import time
from typing import Optional

from dotenv import load_dotenv

from canvas import PILCanvas
from controller import MOBILE_BREAKPOINT, REFRESH_INTERVAL_SECONDS, DashboardController
from layout import render_dashboard
from openweather_provider import OpenWeatherProvider
from server import create_app
from weather_client import DEFAULT_ENDPOINT, WeatherClient
from weather_service import WeatherService


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("weather-carousel")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the weather aggregator endpoint")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=5000)
    serve.add_argument("--cache-ttl", type=int, default=300)
    serve.add_argument("--workers", type=int, default=None, help="Parallel upstream requests")
    serve.add_argument("--icon", default=None, help="PNG served by /api/check-icon")

    show = subparsers.add_parser("show", help="Run the dashboard and render it to a PNG")
    show.add_argument("--url", default=None, help="Aggregator endpoint URL")
    show.add_argument("--interval", type=float, default=REFRESH_INTERVAL_SECONDS, help="Seconds between refreshes")
    show.add_argument("--width", type=int, default=1200)
    show.add_argument("--height", type=int, default=400)
    show.add_argument("--window-width", type=int, default=None,
                      help=f"Window width; below {MOBILE_BREAKPOINT} cities are stacked")
    show.add_argument("--output", default="dashboard.png")
    show.add_argument("--once", action="store_true", help="Render once and exit")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers
    )


def load_api_key() -> str:
    load_dotenv()
    api_key = os.getenv("WEATHER_API_KEY")
    if not api_key:
        raise SystemExit("Missing WEATHER_API_KEY in environment")
    return api_key


def build_weather_service(api_key: str, args: argparse.Namespace) -> WeatherService:
    provider = OpenWeatherProvider(
        api_key=api_key,
        lang=os.getenv("WEATHER_LANG", "en"),
        timeout=args.timeout,
    )
    service = WeatherService(
        provider=provider,
        cache_ttl_seconds=args.cache_ttl,
        max_workers=args.workers,
    )
    logging.info("Weather service ready (%s cities, cache ttl=%ss)", len(service.cities), args.cache_ttl)
    return service


def serve(args: argparse.Namespace) -> None:
    service = build_weather_service(load_api_key(), args)
    app = create_app(service, icon_path=args.icon)
    logging.info("Serving weather on http://%s:%s/api/weather", args.host, args.port)
    app.run(host=args.host, port=args.port)


def render(controller: DashboardController, args: argparse.Namespace) -> None:
    canvas = PILCanvas(args.width, args.height)
    window_width = args.window_width if args.window_width is not None else args.width
    render_dashboard(
        canvas,
        controller.records,
        vertical=window_width < MOBILE_BREAKPOINT,
        offset=controller.drag_offset,
    )
    canvas.save(args.output)
    logging.info("Rendered %s cities to %s (updated %s)",
                 len(controller.records), args.output, controller.last_updated_label())
    if controller.error:
        logging.warning("Dashboard error: %s", controller.error)


def show(args: argparse.Namespace) -> None:
    load_dotenv()
    url = args.url or os.getenv("WEATHER_ENDPOINT", DEFAULT_ENDPOINT)
    controller = DashboardController(WeatherClient(url, timeout=args.timeout))

    controller.mount()
    render(controller, args)
    if args.once:
        return

    while True:
        time.sleep(max(args.interval, 1.0))
        if controller.on_timer():
            render(controller, args)


def signal_handler(signum, frame):
    logging.info("Received signal %s, shutting down", signum)
    raise KeyboardInterrupt()


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        if args.command == "serve":
            serve(args)
        else:
            show(args)
    except KeyboardInterrupt:
        logging.info("Stopping")


if __name__ == "__main__":
    main()
