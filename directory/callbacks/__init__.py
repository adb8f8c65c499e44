"""
Callback functions for the listing module.

This package contains all Dash callback functions organized by functionality:
- controls: control events -> query string, query string -> control values
- listing: query string -> checklist options, provider cards, result count
"""

import logging
import time
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Track registered callbacks to prevent duplicates
_registered_callbacks = set()
_registration_stats = {}

# Define expected callback modules and their minimum callback counts
CALLBACK_MODULES = {
    'controls': {'min_callbacks': 1, 'description': 'Control and URL synchronization'},
    'listing': {'min_callbacks': 1, 'description': 'Provider list rendering'},
}


def _callback_count(app) -> int:
    # Dash stores callbacks in different places depending on version
    if hasattr(app, 'callback_map'):
        return len(app.callback_map)
    if hasattr(app, '_callback_list'):
        return len(app._callback_list)
    return 0


def register_all_callbacks(app) -> Dict[str, Any]:
    """
    Register all listing page callbacks with the Dash app.

    Args:
        app: The Dash application instance

    Returns:
        Dict containing registration statistics and status

    Raises:
        ValueError: if no app is given
        RuntimeError: if every callback module fails to register
    """
    if not app:
        raise ValueError("Valid Dash app instance required for callback registration")

    app_id = id(app)
    if app_id in _registered_callbacks:
        logger.debug("Listing callbacks already registered for this app instance")
        return _registration_stats.get(app_id, {})

    from . import controls, listing
    modules = {
        'controls': controls,
        'listing': listing,
    }

    start_time = time.time()
    registration_results = {
        'app_id': app_id,
        'start_time': start_time,
        'modules': {},
        'total_callbacks': 0,
        'success': False,
        'errors': []
    }

    failed_modules = []
    for module_name, module in modules.items():
        module_start = time.time()
        module_info = CALLBACK_MODULES.get(module_name, {})

        try:
            callbacks_before = _callback_count(app)
            module.register_callbacks(app)
            callbacks_registered = _callback_count(app) - callbacks_before

            min_expected = module_info.get('min_callbacks', 1)
            if callbacks_registered < min_expected:
                logger.warning(
                    f"Module {module_name} registered {callbacks_registered} callbacks, "
                    f"expected at least {min_expected}"
                )

            module_duration = time.time() - module_start
            registration_results['modules'][module_name] = {
                'success': True,
                'callbacks_registered': callbacks_registered,
                'duration_ms': round(module_duration * 1000, 2),
                'description': module_info.get('description', 'Unknown')
            }
            registration_results['total_callbacks'] += callbacks_registered
            logger.debug(f"{module_name}: {callbacks_registered} callbacks registered")

        except Exception as e:
            error_msg = f"Failed to register {module_name} callbacks: {e}"
            registration_results['modules'][module_name] = {
                'success': False,
                'error': str(e),
                'duration_ms': round((time.time() - module_start) * 1000, 2)
            }
            registration_results['errors'].append(error_msg)
            failed_modules.append(module_name)
            logger.error(error_msg)

    registration_results['duration_ms'] = round((time.time() - start_time) * 1000, 2)
    registration_results['end_time'] = time.time()

    if failed_modules:
        if len(failed_modules) == len(modules):
            raise RuntimeError(f"All callback modules failed to register: {registration_results['errors']}")
        logger.warning(f"Partial callback registration failure: {', '.join(failed_modules)}")
    else:
        registration_results['success'] = True
        _registered_callbacks.add(app_id)
        logger.info(f"Listing callbacks registered: {registration_results['total_callbacks']} callbacks")

    _registration_stats[app_id] = registration_results
    return registration_results


def get_registration_stats(app_id: Optional[int] = None) -> Dict:
    """Get callback registration statistics for one app, or for all of them."""
    if app_id is not None:
        return _registration_stats.get(app_id, {})
    return _registration_stats.copy()


def is_registered(app) -> bool:
    return id(app) in _registered_callbacks


def unregister_callbacks(app) -> bool:
    """
    Mark callbacks as unregistered for a specific app.
    Note: This doesn't actually remove callbacks from Dash,
    just allows re-registration.
    """
    app_id = id(app)
    if app_id in _registered_callbacks:
        _registered_callbacks.remove(app_id)
        _registration_stats.pop(app_id, None)
        return True
    return False


__all__ = [
    'register_all_callbacks',
    'get_registration_stats',
    'is_registered',
    'unregister_callbacks'
]
