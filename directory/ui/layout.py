"""
Main layout definition for the listing page.
"""

import dash_bootstrap_components as dbc
from dash import html

from .components import create_navbar, create_results_section, create_sidebar
from .styles import STYLES


def create_layout(search_placeholder: str):
    """Assemble the listing page: navbar on top, sidebar left, cards right."""
    return html.Div([
        create_navbar(search_placeholder),
        dbc.Container([
            dbc.Row([
                dbc.Col(create_sidebar(), md=3),
                dbc.Col(create_results_section(), md=9),
            ], className="g-4"),
        ], fluid=True),
    ], style=STYLES['page'])
