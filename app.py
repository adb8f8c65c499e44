import argparse

import dash
import dash_bootstrap_components as dbc
from dash import dcc, html

from config_manager import get_config, get_state_manager_config
from core.logging_config import get_logger, set_log_level, setup_logging
from directory.callbacks import register_all_callbacks
from directory.ui.layout import create_layout
from state_manager import get_state_manager

config = get_config()
setup_logging(config.state.log_level, log_file=config.state.log_file or None)
logger = get_logger(__name__)

for problem in config.validate():
    logger.warning(f"Configuration problem in {config.config_file_path}: {problem}")

app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.BOOTSTRAP, dbc.icons.BOOTSTRAP],
    suppress_callback_exceptions=True,
    title=config.ui.page_title,
)
server = app.server

app.layout = html.Div([
    # The page's query string holds every applied filter and sort parameter
    dcc.Location(id='url', refresh=False),
    create_layout(config.ui.search_placeholder),
])

register_all_callbacks(app)

# Initialize StateManager with configuration
try:
    state_manager = get_state_manager(get_state_manager_config())
except Exception as e:
    logger.warning(f"StateManager initialization failed: {e}")
    # Fallback to default configuration
    state_manager = get_state_manager()


def load_provider_records() -> int:
    """Fetch the provider records once and return how many are available."""
    state_manager.load_records()
    return len(state_manager.record_store)


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Provider Directory - find and filter doctors')
    parser.add_argument('--port', type=int, default=8050, help='Port to serve on')
    parser.add_argument('--debug', action='store_true', help='Run the Dash dev server in debug mode')
    args = parser.parse_args()

    if args.debug:
        set_log_level('DEBUG')

    count = load_provider_records()
    logger.info(f"Serving {count} provider records on http://127.0.0.1:{args.port}")

    app.run(debug=args.debug, port=args.port, use_reloader=False)
