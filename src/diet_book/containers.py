"""Dependency container wiring for the application."""

import sys
from dataclasses import dataclass
from typing import TextIO

from diet_book.adapters.catalog_store import TextCatalogStore
from diet_book.adapters.food_list_store import TextFoodListStore
from diet_book.adapters.person_store import TextPersonStore
from diet_book.config import Settings
from diet_book.services.session import SessionManager
from diet_book.ui import Ui


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    ui: Ui
    food_list_store: TextFoodListStore
    person_store: TextPersonStore
    catalog_store: TextCatalogStore
    session_manager: SessionManager


def build_container(
    settings: Settings | None = None,
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    food_list_store = TextFoodListStore(resolved_settings.food_list_path)
    person_store = TextPersonStore(resolved_settings.user_info_path)
    catalog_store = TextCatalogStore(resolved_settings.catalog_file)
    ui = Ui(
        input_stream=input_stream or sys.stdin,
        output_stream=output_stream or sys.stdout,
    )
    session_manager = SessionManager(
        food_list_repository=food_list_store,
        person_repository=person_store,
        catalog_repository=catalog_store,
    )
    return AppContainer(
        settings=resolved_settings,
        ui=ui,
        food_list_store=food_list_store,
        person_store=person_store,
        catalog_store=catalog_store,
        session_manager=session_manager,
    )
