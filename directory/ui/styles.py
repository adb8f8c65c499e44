"""
Styling constants and themes for the provider listing UI.

This module contains centralized styling definitions to ensure consistent
appearance across all listing components.
"""

# Color scheme
COLORS = {
    'primary': '#1e40af',
    'link': '#3b82f6',
    'muted': '#4b5563',
    'background': '#f3f4f6',
    'card': '#ffffff',
}

# Common spacing values
SPACING = {
    'xs': '5px',
    'sm': '10px',
    'md': '20px',
    'lg': '30px',
    'navbar_offset': '96px'
}

# Component-specific styles
STYLES = {
    'page': {
        'backgroundColor': COLORS['background'],
        'minHeight': '100vh',
        'paddingTop': SPACING['navbar_offset']
    },

    'sidebar': {
        'position': 'sticky',
        'top': SPACING['navbar_offset'],
        'backgroundColor': COLORS['card'],
        'borderRadius': '6px',
        'padding': SPACING['md']
    },

    'specialty_list': {
        'maxHeight': '12rem',
        'overflowY': 'auto',
        'paddingRight': SPACING['sm']
    },

    'clear_all': {
        'color': COLORS['link'],
        'cursor': 'pointer',
        'fontSize': '0.875rem'
    },

    'provider_photo': {
        'width': '96px',
        'height': '96px',
        'objectFit': 'cover',
        'borderRadius': '12px'
    },

    'empty_state': {
        'fontStyle': 'italic',
        'color': COLORS['muted']
    }
}

# Bootstrap classes commonly used
CLASSES = {
    'navbar': "fixed-top justify-content-center shadow-sm",
    'search_group': "w-100 mx-auto",
    'section_title': "fw-semibold mb-3",
    'filter_label': "d-block small",
    'card': "mb-3 shadow-sm rounded-3",
    'card_row': "d-flex align-items-center justify-content-between",
    'text_muted': "small text-muted mb-1",
    'margin_bottom': "mb-3",
    'text_end': "text-end"
}

# Labels shown for each query value
SORT_LABELS = {
    'fees': "Price",
    'experience': "Experience",
}

SORT_ORDER_LABELS = {
    'asc': "Low - High",
    'desc': "High - Low",
}

MODE_LABELS = {
    'video': "Video Consultation",
    'in-clinic': "In-clinic Consultation",
    '': "All",
}
