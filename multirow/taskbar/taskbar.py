import threading
from typing import Any, Callable, Dict, List, Optional
import structlog
from multirow.core.geometry import PanelGeometry, Rect
from multirow.core.grouping import insertion_index
from multirow.core.log_setup import PLAN_UNCHANGED_MESSAGE
from multirow.core.plan import LayoutPlan, compute_plan
from multirow.core.width import items_per_row
from multirow.taskbar.config import TaskbarConfig


class TaskbarLayout:
    """
    Toolkit-agnostic taskbar model.
    Keeps the ordered list of window views, replans whenever the container
    geometry, the visible view count or the settings change, and tells
    listeners when the plan actually differs from the previous one. A UI
    layer applies the plan to its widgets; nothing here renders.
    Views are dicts carrying at least "id", plus optional "app-id" (the
    group key) and "workspace".

    Config reloads arrive on the watchdog observer thread. Pass
    schedule=GLib.idle_add (or the host loop's equivalent) to run them on
    the UI thread. Without a scheduler they run on the observer thread;
    item and plan updates are serialized by a lock either way, and plan
    listeners are always called with the lock released.
    """

    def __init__(
        self,
        config: TaskbarConfig,
        logger=None,
        vertical: bool = False,
        schedule: Optional[Callable[[Callable], Any]] = None,
    ):
        self.config = config
        self.logger = logger or structlog.get_logger()
        self.vertical = vertical
        self.schedule = schedule
        self.items: List[Dict[str, Any]] = []
        self.geometry = PanelGeometry(height=0, width=0)
        # bumped whenever on-screen button positions change
        self.layout_serial = 0
        self.current_workspace: Optional[Any] = None
        self.plan: Optional[LayoutPlan] = None
        self._lock = threading.RLock()
        self._plan_listeners: List[Callable[[LayoutPlan], None]] = []
        self.config.register_settings()
        self.config.config_handler.connect_reload(self._on_config_reload)

    def connect_plan_changed(self, callback: Callable[[LayoutPlan], None]) -> None:
        self._plan_listeners.append(callback)

    def index_of(self, view_id: Any) -> int:
        with self._lock:
            return next(
                (i for i, item in enumerate(self.items) if item.get("id") == view_id),
                -1,
            )

    def is_visible(self, view: Dict[str, Any]) -> bool:
        if self.config.show_all_workspaces or self.current_workspace is None:
            return True
        workspace = view.get("workspace")
        return workspace is None or workspace == self.current_workspace

    def visible_items(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [item for item in self.items if self.is_visible(item)]

    def add_view(self, view: Dict[str, Any]) -> int:
        """
        Inserts a view next to the other windows of its app, or at the end
        when grouping is off or the app is new.
        Returns:
            The index the view now occupies in self.items.
        """
        with self._lock:
            existing = self.index_of(view.get("id"))
            if existing != -1:
                self.logger.debug(f"View {view.get('id')} already on the taskbar.")
                return existing
            group_key = view.get("app-id") if self.config.group_windows else None
            index = insertion_index(
                [item.get("app-id") for item in self.items], group_key
            )
            self.items.insert(index, view)
        self.logger.debug(f"Added view {view.get('id')} at index {index}.")
        self.update_plan()
        return index

    def remove_view(self, view_id: Any) -> bool:
        with self._lock:
            index = self.index_of(view_id)
            if index != -1:
                del self.items[index]
        if index == -1:
            self.logger.warning(f"View {view_id} not found on the taskbar.")
            return False
        self.update_plan()
        return True

    def move_view(self, view_id: Any, target_id: Any) -> bool:
        """Moves view_id into the slot currently held by target_id."""
        with self._lock:
            source = self.index_of(view_id)
            target = self.index_of(target_id)
            if source == -1 or target == -1:
                self.logger.warning(
                    f"Cannot move {view_id} onto {target_id}: unknown view."
                )
                return False
            if source == target:
                return False
            self.items.insert(target, self.items.pop(source))
            return True

    def set_geometry(self, height: float, width: float) -> LayoutPlan:
        geometry = PanelGeometry(height=height, width=width)
        with self._lock:
            if geometry != self.geometry:
                self.geometry = geometry
                self.layout_serial += 1
        return self.update_plan()

    def set_workspace(self, workspace: Any) -> LayoutPlan:
        with self._lock:
            self.current_workspace = workspace
        return self.update_plan()

    def _on_config_reload(self) -> None:
        if self.schedule:
            self.schedule(self.apply_config)
        else:
            self.apply_config()

    def apply_config(self) -> bool:
        """
        Re-reads settings after a config reload and replans.
        Returns False so it can be handed to GLib.idle_add as a one-shot.
        """
        with self._lock:
            self.config.register_settings()
        self.update_plan()
        return False

    def update_plan(self) -> LayoutPlan:
        with self._lock:
            plan = compute_plan(
                self.geometry, len(self.visible_items()), self.config.layout
            )
            if plan == self.plan:
                self.logger.debug(PLAN_UNCHANGED_MESSAGE)
                return plan
            previous = self.plan
            if previous is not None and (
                previous.rows != plan.rows
                or previous.row_height != plan.row_height
                or previous.effective_item_width != plan.effective_item_width
            ):
                # buttons moved on screen, rects captured before now are stale
                self.layout_serial += 1
            self.plan = plan
            listeners = list(self._plan_listeners)
        self.logger.debug(
            f"New layout plan: {plan.rows} row(s), {plan.mode}, "
            f"width {plan.effective_item_width}, icon-only {plan.icon_only_mode}."
        )
        for callback in listeners:
            callback(plan)
        return plan

    def item_rects(self) -> List[Rect]:
        """
        Grid positions of the visible buttons under the current plan, filled
        row by row. Used as the rect source when no toolkit reports real
        allocations.
        """
        plan = self.plan or self.update_plan()
        with self._lock:
            width = plan.effective_item_width
            per_row = items_per_row(self.geometry.width, width)
            pitch = plan.row_height + self.config.layout.vertical_margin
            count = len(self.visible_items())
        return [
            Rect(
                x=(index % per_row) * width,
                y=(index // per_row) * pitch,
                width=width,
                height=plan.row_height,
            )
            for index in range(count)
        ]
