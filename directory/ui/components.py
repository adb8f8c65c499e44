"""
Reusable UI components for the provider listing.

This module contains functions that generate the navbar, the filter
sidebar and the provider cards.
"""

from typing import Iterable, List

import dash_bootstrap_components as dbc
from dash import dcc, html

from ..records import Record
from .styles import CLASSES, MODE_LABELS, SORT_LABELS, SORT_ORDER_LABELS, STYLES


def format_fees(fees) -> str:
    """Render a fee the way the provider API displays it."""
    if isinstance(fees, float) and not fees.is_integer():
        return f"₹ {fees:.2f}"
    return f"₹ {int(fees)}"


def create_navbar(search_placeholder: str):
    """Create the fixed navbar holding the provider search box."""
    return dbc.Navbar(
        dbc.Container(
            dbc.InputGroup([
                dbc.Input(
                    id='search-input',
                    type='search',
                    placeholder=search_placeholder,
                    debounce=True,
                    value=''
                ),
                dbc.InputGroupText(html.I(className="bi bi-search")),
            ], className=CLASSES['search_group']),
            style={'maxWidth': '64rem'}
        ),
        id='listing-navbar',
        color="primary",
        dark=True,
        className=CLASSES['navbar'],
    )


def create_sort_section():
    """Create the 'Sort by' radio groups (key and direction)."""
    return html.Div([
        html.H5("Sort by", className=CLASSES['section_title']),
        dcc.RadioItems(
            id='sort-radio',
            options=[{'label': label, 'value': value} for value, label in SORT_LABELS.items()],
            value=None,
            labelClassName=CLASSES['filter_label'],
            inputClassName="me-2"
        ),
        dcc.RadioItems(
            id='sort-order-radio',
            options=[{'label': label, 'value': value} for value, label in SORT_ORDER_LABELS.items()],
            value='asc',
            inline=True,
            labelClassName="me-3 small",
            inputClassName="me-1",
            className="mt-2"
        ),
    ], className=CLASSES['margin_bottom'])


def create_filters_section():
    """Create the filters block: clear-all link, specialty search and checklist, mode radios."""
    return html.Div([
        html.H5("Filters", className=CLASSES['section_title']),
        html.A("Clear All", id='clear-all-link', n_clicks=0, style=STYLES['clear_all']),

        html.Div([
            html.H6("Specialities", className="mt-3"),
            dbc.Input(
                id='specialty-search-input',
                type='text',
                placeholder="Search Specialities",
                size="sm",
                value='',
                className="mb-2"
            ),
            html.Div(
                dcc.Checklist(
                    id='specialty-checklist',
                    options=[],
                    value=[],
                    labelClassName=CLASSES['filter_label'],
                    inputClassName="me-2"
                ),
                style=STYLES['specialty_list']
            ),
        ], className=CLASSES['margin_bottom']),

        html.Div([
            html.H6("Mode of consultation"),
            dcc.RadioItems(
                id='mode-radio',
                options=[{'label': label, 'value': value} for value, label in MODE_LABELS.items()],
                value='',
                labelClassName=CLASSES['filter_label'],
                inputClassName="me-2"
            ),
        ]),
    ])


def create_sidebar():
    return html.Aside([
        create_sort_section(),
        create_filters_section(),
    ], style=STYLES['sidebar'])


def create_provider_card(record: Record):
    """Create one provider card. The booking button is decorative."""
    details = [html.H5(record.name, className="fw-bold mb-1")]
    if record.primary_category:
        details.append(html.P(record.primary_category, className=CLASSES['text_muted']))
    details.append(html.P(f"{record.experience_years} years of experience", className="small mb-1"))
    if record.location_label:
        details.append(html.P(record.location_label, className=CLASSES['text_muted']))

    summary = [html.Div(details)]
    if record.photo:
        summary.insert(0, html.Img(src=record.photo, alt="", style=STYLES['provider_photo']))

    return dbc.Card(dbc.CardBody(html.Div([
        html.Div(summary, className="d-flex gap-3"),
        html.Div([
            html.P(format_fees(record.fees), className="fw-medium mb-2"),
            dbc.Button("Book Appointment", color="primary", outline=True, size="sm"),
        ], className=CLASSES['text_end']),
    ], className=CLASSES['card_row'])), className=CLASSES['card'])


def create_provider_cards(records: Iterable[Record]) -> List:
    cards = [create_provider_card(record) for record in records]
    if not cards:
        return [html.P("No doctors match the selected filters.", style=STYLES['empty_state'])]
    return cards


def create_results_section():
    """Create the result count and the card list container."""
    return html.Section([
        html.P(id='result-count', className=CLASSES['text_muted']),
        dcc.Loading(html.Div(id='provider-list'), type="default"),
    ])
