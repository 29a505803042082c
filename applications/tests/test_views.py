from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from accounts.models import User
from analysis.models import AnalysisResult
from applications.models import Application, SkillScore
from projects.models import Project


class ApplicationTestCase(TestCase):

    def setUp(self) -> None:
        self.creator = User.objects.create_user(username="creator", password="pass-1234")
        self.alice = User.objects.create_user(username="alice", password="pass-1234", name="Alice")
        self.bob = User.objects.create_user(username="bob", password="pass-1234", name="Bob")
        self.project = Project.objects.create(
            creator=self.creator,
            title="Study Buddy",
            description="Pair students",
            tech_stack="Python, React",
            team_size=2,
            duration_weeks=4,
        )
        self.application = Application.objects.create_with_skills(
            user=self.alice,
            project=self.project,
            tech_stacks=["React", "Django"],
            tech_scores=[8, 5],
        )

    def client_for(self, user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client


class ApplicationManagerTests(ApplicationTestCase):

    def test_create_with_skills_keeps_order(self) -> None:
        skills = list(self.application.skill_scores.values_list("tech_name", "score"))

        self.assertEqual(skills, [("React", 8), ("Django", 5)])
        self.assertEqual(self.application.status, Application.Status.PENDING)

    def test_create_with_skills_rejects_mismatched_lengths(self) -> None:
        with self.assertRaises(ValueError):
            Application.objects.create_with_skills(
                user=self.bob, project=self.project, tech_stacks=["Go"], tech_scores=[]
            )

        self.assertEqual(Application.objects.for_user(self.bob.id).count(), 0)

    def test_approved_for_project_is_ordered_and_filtered(self) -> None:
        later = Application.objects.create_with_skills(
            user=self.bob, project=self.project, tech_stacks=["Go"], tech_scores=[7]
        )
        later.change_status(Application.Status.APPROVED)
        self.application.change_status(Application.Status.APPROVED)
        Application.objects.create_with_skills(
            user=self.creator, project=self.project, tech_stacks=["Figma"], tech_scores=[9]
        )

        roster = list(Application.objects.approved_for_project(self.project.id))

        self.assertEqual([a.id for a in roster], [self.application.id, later.id])

    def test_approval_updates_current_team_size(self) -> None:
        self.application.change_status(Application.Status.APPROVED)
        self.project.refresh_from_db()
        self.assertEqual(self.project.current_team_size, 1)

        self.application.change_status(Application.Status.REJECTED)
        self.project.refresh_from_db()
        self.assertEqual(self.project.current_team_size, 0)

    def test_unknown_status_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.application.change_status("WAITLISTED")


class ApplicationViewSetTests(ApplicationTestCase):

    def test_retrieve_includes_skills_and_analysis(self) -> None:
        AnalysisResult.objects.create(
            application=self.application,
            compatibility_score=Decimal("81.25"),
            compatibility_reason="Good frontend depth",
        )

        response = self.client_for(self.alice).get(f"/api/applications/{self.application.id}/")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["applicant_name"], "Alice")
        self.assertEqual(len(body["skill_scores"]), 2)
        self.assertEqual(body["analysis"]["compatibility_score"], 81.25)

    def test_list_shows_own_and_received_applications(self) -> None:
        Application.objects.create_with_skills(
            user=self.bob, project=self.project, tech_stacks=["Go"], tech_scores=[7]
        )

        alice_view = self.client_for(self.alice).get("/api/applications/").json()
        creator_view = self.client_for(self.creator).get("/api/applications/").json()

        self.assertEqual({item["username"] for item in alice_view}, {"alice"})
        self.assertEqual({item["username"] for item in creator_view}, {"alice", "bob"})

    def test_list_filters_by_user(self) -> None:
        Application.objects.create_with_skills(
            user=self.bob, project=self.project, tech_stacks=["Go"], tech_scores=[7]
        )

        response = self.client_for(self.creator).get(f"/api/applications/?user={self.bob.id}")

        self.assertEqual([item["username"] for item in response.json()], ["bob"])

    def test_creator_can_approve(self) -> None:
        response = self.client_for(self.creator).patch(
            f"/api/applications/{self.application.id}/status/",
            {"status": "APPROVED"},
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        self.application.refresh_from_db()
        self.assertEqual(self.application.status, Application.Status.APPROVED)

    def test_applicant_cannot_approve_themselves(self) -> None:
        response = self.client_for(self.alice).patch(
            f"/api/applications/{self.application.id}/status/",
            {"status": "APPROVED"},
            format="json",
        )

        self.assertEqual(response.status_code, 403)

    def test_invalid_status_is_400(self) -> None:
        response = self.client_for(self.creator).patch(
            f"/api/applications/{self.application.id}/status/",
            {"status": "MAYBE"},
            format="json",
        )

        self.assertEqual(response.status_code, 400)

    def test_delete_cascades_to_skills_and_analysis(self) -> None:
        AnalysisResult.objects.create(
            application=self.application,
            compatibility_score=Decimal("50.00"),
            compatibility_reason="Average",
        )

        response = self.client_for(self.alice).delete(f"/api/applications/{self.application.id}/")

        self.assertEqual(response.status_code, 204)
        self.assertFalse(Application.objects.filter(pk=self.application.id).exists())
        self.assertFalse(SkillScore.objects.exists())
        self.assertFalse(AnalysisResult.objects.exists())

    def test_withdrawing_approved_application_shrinks_team(self) -> None:
        self.application.change_status(Application.Status.APPROVED)

        response = self.client_for(self.alice).delete(f"/api/applications/{self.application.id}/")

        self.assertEqual(response.status_code, 204)
        self.project.refresh_from_db()
        self.assertEqual(self.project.current_team_size, 0)

    def test_project_creator_cannot_delete_application(self) -> None:
        response = self.client_for(self.creator).delete(f"/api/applications/{self.application.id}/")

        self.assertEqual(response.status_code, 403)

    def test_unrelated_user_cannot_see_application(self) -> None:
        outsider = User.objects.create_user(username="eve", password="pass-1234")

        response = self.client_for(outsider).get(f"/api/applications/{self.application.id}/")

        self.assertEqual(response.status_code, 404)
