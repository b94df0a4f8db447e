import pytest

from codekata.people import Person, Registry


def test_person_describe():
    assert Person("Ada", 36).describe() == "Ada 36"


def test_professor_describe():
    registry = Registry()
    professor = registry.professor("Walter", 56, 99)
    assert professor.describe() == "Walter 56 99 1"


def test_student_describe_sums_marks():
    registry = Registry()
    student = registry.student("Jesse", 18, [0, 0, 0, 0, 0, 95])
    assert student.describe() == "Jesse 18 95 1"


def test_student_sum_matches_marks():
    marks = [10, 20, 30, 40, 50, 60]
    student = Registry().student("Kim", 20, marks)
    assert student.describe().split()[2] == str(sum(marks))


def test_identifiers_are_counted_per_kind():
    registry = Registry()
    professors = [registry.professor(f"p{i}", 40, i) for i in range(3)]
    students = [registry.student(f"s{i}", 20, [1] * 6) for i in range(2)]
    assert [p.cur_id for p in professors] == [1, 2, 3]
    assert [s.cur_id for s in students] == [1, 2]


def test_registries_are_independent():
    first = Registry()
    first.professor("a", 1, 1)
    second = Registry()
    assert second.professor("b", 2, 2).cur_id == first.professor("c", 3, 3).cur_id - 1


def test_student_needs_six_marks():
    registry = Registry()
    with pytest.raises(ValueError):
        registry.student("Short", 19, [1, 2, 3])
    assert registry.student("Full", 19, [1] * 6).cur_id == 1