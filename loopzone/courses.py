"""Track sections such as loops and pipes that follow the runner through them."""

from __future__ import annotations

from collections.abc import Sequence

from .actor import Actor
from .enums import CYAN, MAGENTA, PIXEL_LEN, RED, CourseKind
from .geometry import Rect, Vector

_NO_SECTION = 0
_FIRST_SECTION = 1
_SECOND_SECTION = 2


class Course:
    """A section of track; the base course never detects the runner."""

    def __init__(
        self,
        pos: Vector | None = None,
        size: Vector | None = None,
        runner: Actor | None = None,
    ) -> None:
        self.pos = pos if pos is not None else Vector(0.0, 0.0)
        self.size = size if size is not None else Vector(0.0, 0.0)
        self.runner = runner
        self.course_info = CourseKind.NONE
        self.course_entered = False
        self.course_passed = False
        self.flag = False
        self.color = RED

    def update(self) -> bool:
        """Refresh the runner's state, recolour while inside and reset on escape."""
        self.update_runner_state()
        if self.course_entered:
            self.course_meeting()
        if self.is_escaped():
            self.course_entered = False
            self.course_passed = False
        return True

    def course_meeting(self) -> bool:
        """Update the colour while the runner is on the course."""
        if not self.course_entered:
            return False
        self.set_color()
        return True

    def is_escaped(self) -> bool:
        return False

    def update_runner_state(self) -> bool:
        return False

    def set_color(self) -> bool:
        return False

    def reset_enter_info(self) -> None:
        self.course_entered = False
        self.course_passed = False

    def _runner_pos(self) -> Vector:
        if self.runner is None:
            raise RuntimeError(f"{type(self).__name__} has no runner")
        return self.runner.pos


class LoopCourse(Course):
    """A vertical loop split into a left and a right half around its centre."""

    def __init__(self, pos: Vector, size: Vector, runner: Actor | None = None) -> None:
        super().__init__(pos, size, runner)
        self.course_info = CourseKind.LOOP
        self.end_line = pos.x + size.x / 2
        self.begin_line = pos.x - size.x / 2
        self.mid_line = pos.x

    def update_runner_state(self) -> bool:
        runner_pos = self._runner_pos()

        if self.begin_line <= runner_pos.x < self.mid_line:
            if self.flag and not self.course_entered:
                self.course_entered = True
            elif not self.flag and self.course_entered and runner_pos.y < self.pos.y:
                self.flag = not self.flag
                self.course_passed = True
        elif self.mid_line <= runner_pos.x < self.end_line:
            if not self.flag and not self.course_entered:
                self.course_entered = True
            elif self.flag and self.course_entered and runner_pos.y < self.pos.y:
                self.flag = not self.flag
                self.course_passed = True
        return True

    def is_escaped(self) -> bool:
        """True once the loop was passed and the runner has crossed back over its centre."""
        if self.course_entered and self.course_passed:
            x = self._runner_pos().x
            if self.flag and x > self.pos.x:
                return True
            if not self.flag and x < self.pos.x:
                return True
        return False

    def set_color(self) -> bool:
        self.color = CYAN if self.flag else MAGENTA
        return True


class PipeCourse(Course):
    """A pipe with two enter sensors; the colour switches at a height threshold."""

    def __init__(self, pos: Vector, size: Vector, runner: Actor | None = None) -> None:
        super().__init__(pos, size, runner)
        self.course_info = CourseKind.PIPE
        self.pipe_section = Rect.from_center(pos, size.x / 2, size.y / 2)
        self.current_enter_section_index = _NO_SECTION
        self.flag_switcher = 0.0
        self.rect_size = Vector(0.0, 0.0)
        self.enter_sections: list[Rect | None] = [None, None, None]

    def set_sensors(self, sensors: Sequence[Vector], size: Vector, flag_switcher: float) -> None:
        """Place the two enter sensors, each extending ``size`` around its centre."""
        first, second = sensors
        self.rect_size = size
        self.enter_sections[_FIRST_SECTION] = Rect.from_center(first, size.x, size.y)
        self.enter_sections[_SECOND_SECTION] = Rect.from_center(second, size.x, size.y)
        self.flag_switcher = flag_switcher

    def _runner_rect(self) -> Rect:
        return Rect.from_center(self._runner_pos(), PIXEL_LEN, PIXEL_LEN)

    def _touches(self, index: int) -> bool:
        if not 0 <= index < len(self.enter_sections):
            raise IndexError(f"enter section index out of range: {index}")
        section = self.enter_sections[index]
        return section is not None and section.intersects(self._runner_rect())

    def is_contacting_enter_section(self, index: int | None = None) -> bool:
        """Whether the runner touches an enter sensor.

        Without ``index`` both sensors are tried in order and the one touched
        becomes the current section; with ``index`` only that sensor is checked.
        """
        if index is not None:
            return self._touches(index)
        for candidate in (_FIRST_SECTION, _SECOND_SECTION):
            if self._touches(candidate):
                self.current_enter_section_index = candidate
                return True
        return False

    def is_runner_in_pipe_section(self) -> bool:
        return self.pipe_section.intersects(self._runner_rect())

    def is_runner_correctly_in_pipe_section(self) -> bool:
        """True when the runner's box lies strictly inside the pipe."""
        runner = self._runner_rect()
        pipe = self.pipe_section
        return (
            runner.left > pipe.left
            and runner.right < pipe.right
            and runner.top > pipe.top
            and runner.bottom < pipe.bottom
        )

    def update_runner_state(self) -> bool:
        # Records which sensor is touched, if any.
        self.is_contacting_enter_section()

        if not self.course_entered:
            if not self.is_contacting_enter_section(self.current_enter_section_index):
                self.current_enter_section_index = _NO_SECTION
                if self.is_runner_in_pipe_section():
                    self.course_entered = True
                    self.color = MAGENTA
                else:
                    self.course_entered = False
                    self.course_passed = False
        else:
            if not self.is_runner_in_pipe_section():
                self.course_entered = False
            if self.is_contacting_enter_section():
                self.course_passed = True
            if self.course_passed and not self.is_contacting_enter_section():
                if self.is_runner_in_pipe_section():
                    # Back inside without leaving: the pass does not count.
                    self.course_entered = True
                    self.course_passed = False
        return True

    def is_escaped(self) -> bool:
        settled = self.course_entered == self.course_passed
        return settled and not self.is_contacting_enter_section()

    def set_color(self) -> bool:
        if self.runner is None:
            return False
        self.color = MAGENTA if self.runner.pos.y < self.flag_switcher else CYAN
        return True


class CourseManager:
    """Tracks the course the runner is currently on, if any."""

    def __init__(self) -> None:
        self.courses: list[Course] = []
        self.current: Course = Course()

    def add_course(self, course: Course) -> None:
        """Register ``course`` once; adding it again has no effect."""
        if any(existing is course for existing in self.courses):
            return
        self.courses.append(course)

    def update(self) -> None:
        if self.current.course_info is CourseKind.NONE:
            for course in self.courses:
                course.update()
                if course.course_entered and self.current.course_info is CourseKind.NONE:
                    self.current = course
        else:
            self.current.update()
            if self.current.is_escaped():
                self.current.reset_enter_info()
                self.current = Course()

    @property
    def course_entered(self) -> bool:
        if self.current.course_info is CourseKind.NONE:
            return False
        return self.current.course_entered

    @property
    def course_passed(self) -> bool:
        if self.current.course_info is CourseKind.NONE:
            return False
        return self.current.course_passed

    def contacted_course(self) -> Course | None:
        """The course the runner is inside, or ``None``."""
        return self.current if self.current.course_entered else None