"""Read-only queries over a loaded snapshot."""

import copy

import pytest

from edu_analytics.services import stats
from edu_analytics.utils.errors import EmptyResultError, NotFoundError


def ids(records):
    return [r["id"] for r in records]


class TestUserQueries:
    def test_instructors(self, snapshot):
        assert ids(stats.instructors(snapshot)) == ["u1", "u4"]

    def test_courses_of_user(self, snapshot):
        assert ids(stats.courses_of_user(snapshot, "u2")) == ["c1", "c2"]

    def test_courses_of_user_without_enrollments(self, snapshot):
        assert stats.courses_of_user(snapshot, "u1") == []

    def test_courses_of_unknown_user(self, snapshot):
        with pytest.raises(NotFoundError):
            stats.courses_of_user(snapshot, "ghost")

    def test_progress_above_default_is_strict(self, snapshot):
        assert ids(stats.users_with_progress_above(snapshot)) == ["u3"]
        snapshot["usuarios"][2]["progressoCursos"] = {"c1": 90}
        assert stats.users_with_progress_above(snapshot) == []

    def test_progress_above_custom_min(self, snapshot):
        assert ids(stats.users_with_progress_above(snapshot, 80)) == ["u2", "u3"]

    def test_comments_of_user(self, snapshot):
        assert ids(stats.comments_of_user(snapshot, "u3")) == ["k2", "k4"]
        assert stats.comments_of_user(snapshot, "ghost") == []

    def test_users_by_type(self, snapshot):
        assert stats.users_by_type(snapshot) == {"instrutor": 2, "aluno": 2}

    def test_users_with_multiple_certificates(self, snapshot):
        assert stats.users_with_multiple_certificates(snapshot) == []
        snapshot["certificados"].append({"id": "z2", "usuarioId": "u3", "cursoId": "c1"})
        assert ids(stats.users_with_multiple_certificates(snapshot)) == ["u3"]

    def test_course_status(self, snapshot):
        assert stats.course_status(snapshot, "u2") == {"c1": "em andamento", "c2": "não iniciado"}
        assert stats.course_status(snapshot, "u3") == {"c1": "em andamento", "c3": "completo"}

    def test_course_status_only_reports_present_keys(self, snapshot):
        assert stats.course_status(snapshot, "u1") == {}

    def test_course_status_unknown_user(self, snapshot):
        with pytest.raises(NotFoundError):
            stats.course_status(snapshot, "ghost")


class TestCourseQueries:
    def test_many_comments_default_is_strict(self, snapshot):
        # c1 tiene exactamente 3 comentarios
        assert stats.courses_with_many_comments(snapshot) == []

    def test_many_comments_custom_min(self, snapshot):
        assert ids(stats.courses_with_many_comments(snapshot, 2)) == ["c1"]
        assert ids(stats.courses_with_many_comments(snapshot, 0)) == ["c1", "c3"]

    def test_average_progress(self, snapshot):
        assert stats.average_progress(snapshot, "c1") == 90
        # un 0 presente cuenta como dato
        assert stats.average_progress(snapshot, "c2") == 0

    def test_average_progress_without_data(self, snapshot):
        with pytest.raises(EmptyResultError):
            stats.average_progress(snapshot, "c9")

    def test_average_rating_ignores_null(self, snapshot):
        assert stats.average_rating(snapshot, "c1") == 4

    @pytest.mark.parametrize("course_id", ["c2", "c3", "c9"])
    def test_average_rating_without_ratings(self, snapshot, course_id):
        with pytest.raises(EmptyResultError):
            stats.average_rating(snapshot, course_id)

    def test_total_duration_defaults_missing_to_zero(self, snapshot):
        assert stats.total_duration(snapshot, "c1") == 30
        assert stats.total_duration(snapshot, "c2") == 0

    def test_total_duration_without_lessons_field(self, snapshot):
        del snapshot["cursos"][1]["aulas"]
        assert stats.total_duration(snapshot, "c2") == 0

    def test_total_duration_unknown_course(self, snapshot):
        with pytest.raises(NotFoundError):
            stats.total_duration(snapshot, "c9")

    def test_ranking_defaults_to_zero_and_is_stable(self, snapshot):
        ranked = stats.courses_ranked_by_rating(snapshot)
        assert ids(ranked) == ["c1", "c2", "c3"]
        assert [c["mediaNota"] for c in ranked] == [4, 0, 0]

    def test_ranking_orders_descending(self, snapshot):
        snapshot["comentarios"].append({"id": "k5", "cursoId": "c3", "usuarioId": "u2", "texto": "!", "nota": 5})
        assert ids(stats.courses_ranked_by_rating(snapshot)) == ["c3", "c1", "c2"]

    def test_ranking_does_not_touch_snapshot(self, snapshot):
        before = copy.deepcopy(snapshot)
        stats.courses_ranked_by_rating(snapshot)
        assert snapshot == before

    def test_students_with_high_progress(self, snapshot):
        assert ids(stats.students_with_high_progress(snapshot, "c1")) == ["u3"]
        assert ids(stats.students_with_high_progress(snapshot, "c1", 80)) == ["u2", "u3"]
        assert stats.students_with_high_progress(snapshot, "c3", 100) == []


class TestInstructorAndCertificateQueries:
    def test_course_count_for_instructor(self, snapshot):
        assert stats.course_count_for_instructor(snapshot, "u1") == 2
        assert stats.course_count_for_instructor(snapshot, "nobody") == 0

    def test_certificates_per_course(self, snapshot):
        snapshot["certificados"].append({"id": "z2", "usuarioId": "u2", "cursoId": "c3"})
        snapshot["certificados"].append({"id": "z3", "usuarioId": "u3", "cursoId": "c1"})
        assert stats.certificates_per_course(snapshot) == {"c3": 2, "c1": 1}


class TestNonNumericStoredValues:
    def test_ranking_skips_text_ratings(self, snapshot):
        snapshot["comentarios"].append({"id": "k5", "cursoId": "c2", "usuarioId": "u2", "texto": "?", "nota": "5"})
        ranked = stats.courses_ranked_by_rating(snapshot)
        assert [(c["id"], c["mediaNota"]) for c in ranked] == [("c1", 4), ("c2", 0), ("c3", 0)]

    def test_average_rating_skips_text_and_bool(self, snapshot):
        snapshot["comentarios"].append({"id": "k5", "cursoId": "c1", "usuarioId": "u2", "texto": "?", "nota": "1"})
        snapshot["comentarios"].append({"id": "k6", "cursoId": "c1", "usuarioId": "u2", "texto": "?", "nota": True})
        assert stats.average_rating(snapshot, "c1") == 4

    def test_average_progress_skips_text(self, snapshot):
        snapshot["usuarios"][1]["progressoCursos"]["c1"] = "85"
        assert stats.average_progress(snapshot, "c1") == 95

    def test_average_progress_only_text_is_empty(self, snapshot):
        snapshot["usuarios"][1]["progressoCursos"]["c2"] = "0"
        with pytest.raises(EmptyResultError):
            stats.average_progress(snapshot, "c2")

    def test_total_duration_skips_text(self, snapshot):
        snapshot["cursos"][0]["aulas"].append({"duracao": "15"})
        snapshot["cursos"][0]["aulas"].append("aula solta")
        assert stats.total_duration(snapshot, "c1") == 30
