import pytest

from course_studio.domain.course import Course, Lesson, Section
from course_studio.domain.ordering import move, reindex


def _orders(items):
    return [item.order for item in items]


def _titles(items):
    return [item.title for item in items]


@pytest.fixture
def section():
    return Section(
        _id="s1",
        title="Intro",
        lessons=[
            Lesson(_id="l1", title="A", order=0),
            Lesson(_id="l2", title="B", order=1),
            Lesson(_id="l3", title="C", order=2),
        ],
    )


class TestReindex:
    def test_assigns_list_positions(self):
        lessons = [
            Lesson(_id="l1", title="A", order=7),
            Lesson(_id="l2", title="B", order=7),
            Lesson(_id="l3", title="C", order=-1),
        ]

        reindex(lessons)

        assert _orders(lessons) == [0, 1, 2]

    def test_empty_list(self):
        reindex([])


class TestMove:
    def test_move_to_front(self, section):
        move(section.lessons, section.lessons[2], 0)

        assert _titles(section.lessons) == ["C", "A", "B"]
        assert _orders(section.lessons) == [0, 1, 2]

    def test_position_is_clamped(self, section):
        """Позиция за пределами списка прижимается к краю"""
        move(section.lessons, section.lessons[0], 99)
        assert _titles(section.lessons) == ["B", "C", "A"]

        move(section.lessons, section.lessons[2], -5)
        assert _titles(section.lessons) == ["A", "B", "C"]
        assert _orders(section.lessons) == [0, 1, 2]


class TestSectionLessons:
    def test_append_lesson_goes_last(self, section):
        section.append_lesson(Lesson(_id="l4", title="D", order=0))

        assert section.lessons[-1].title == "D"
        assert section.lessons[-1].order == 3

    def test_remove_lesson_closes_gap(self, section):
        assert section.remove_lesson("l2") is True

        assert _titles(section.lessons) == ["A", "C"]
        assert _orders(section.lessons) == [0, 1]

    def test_remove_missing_lesson(self, section):
        assert section.remove_lesson("nope") is False
        assert len(section.lessons) == 3


class TestCourseSections:
    def test_append_and_remove_sections(self):
        course = Course(title="Python", owner_id="u1")
        for index in range(3):
            course.append_section(Section(_id=f"s{index}", title=f"S{index}"))

        assert _orders(course.sections) == [0, 1, 2]

        course.remove_section("s0")

        assert [s._id for s in course.sections] == ["s1", "s2"]
        assert _orders(course.sections) == [0, 1]

    def test_touch_moves_updated_at(self):
        course = Course(title="Python", owner_id="u1")
        before = course.updated_at

        course.touch()

        assert course.updated_at >= before
        assert course.created_at <= course.updated_at
