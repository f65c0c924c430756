from typing import Any, List, Optional, Sequence
from multirow.core.drag import nearest_index
from multirow.core.geometry import Rect


class DragSession:
    """
    Live reordering of one taskbar button during a pointer drag.
    The button rects are captured once when the drag starts. Anything that
    moves buttons on screen (a resize, or a replan that changes rows or
    button width) ends the session, since the captured rects no longer
    match what is shown.
    """

    def __init__(
        self, taskbar, view_id: Any, rects: Optional[Sequence[Rect]] = None
    ):
        """
        Args:
            taskbar: The TaskbarLayout being reordered.
            view_id: Id of the dragged view.
            rects: Button allocations reported by the toolkit, in visible
                order. Defaults to the taskbar's computed grid.
        """
        self.taskbar = taskbar
        self.view_id = view_id
        if rects is None:
            rects = taskbar.item_rects()
        self.rects: List[Rect] = list(rects)
        self.slots = [item.get("id") for item in taskbar.visible_items()]
        self._serial = taskbar.layout_serial
        self.active = True

    def motion(self, x: float, y: float) -> int:
        """
        Moves the dragged view into the slot nearest to the cursor.
        Returns:
            The slot index the dragged view occupies, or -1 when the session
            is no longer usable.
        """
        if not self.active:
            return -1
        if self._serial != self.taskbar.layout_serial:
            self.taskbar.logger.warning(
                "Taskbar layout changed during drag. Ending drag session."
            )
            self.active = False
            return -1
        index = nearest_index(self.rects, x, y, self.taskbar.vertical)
        if index == -1 or index >= len(self.slots):
            return -1
        target_id = self.slots[index]
        if target_id != self.view_id:
            if self.taskbar.move_view(self.view_id, target_id):
                self.taskbar.logger.debug(
                    f"Drag moved view {self.view_id} to slot {index}."
                )
            self.slots = [item.get("id") for item in self.taskbar.visible_items()]
        return index

    def end(self) -> List[Any]:
        """Finishes the drag and returns the resulting visible order."""
        self.active = False
        return [item.get("id") for item in self.taskbar.visible_items()]
