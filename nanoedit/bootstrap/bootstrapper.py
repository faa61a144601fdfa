from nanoedit.dependencies.components import get_components
from nanoedit.dependencies.services import get_edit_session
from nanoedit.services.EditSession.edit_session_interface import EditSessionInterface


def bootstrap_session(
    env: str = "development",
    config_path: str = "configuration",
) -> EditSessionInterface:
    components = get_components(env=env, config_path=config_path)
    return get_edit_session(components)
