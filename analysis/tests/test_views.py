from decimal import Decimal
from unittest import mock

from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.models import User
from analysis.models import AnalysisResult
from applications.models import Application

from .fakes import FakeChatModel, create_application, create_project, create_user


class AnalysisViewTestCase(TestCase):

    def setUp(self) -> None:
        self.creator = create_user("creator", name="Casey")
        self.alice = create_user("alice", name="Alice")
        self.bob = create_user("bob", name="Bob")
        self.project = create_project(creator=self.creator, team_size=2)
        self.application = create_application(self.alice, self.project)

        self.client = APIClient()
        self.client.force_authenticate(user=self.creator)

    def use_model(self, *responses):
        model = FakeChatModel(*responses)
        patcher = mock.patch("analysis.services.get_chat_model", return_value=model)
        patcher.start()
        self.addCleanup(patcher.stop)
        return model


class ApplicationAnalysisViewTests(AnalysisViewTestCase):

    def _url(self, application_id):
        return reverse("application_analysis", kwargs={"application_id": application_id})

    def test_post_creates_analysis(self) -> None:
        self.use_model("75.50|Strong React, weak backend")

        response = self.client.post(self._url(self.application.id))

        self.assertEqual(response.status_code, 201)
        data = response.json()["data"]
        self.assertEqual(data["application_id"], self.application.id)
        self.assertEqual(data["compatibility_score"], 75.5)
        self.assertEqual(data["compatibility_reason"], "Strong React, weak backend")

    def test_repeated_post_returns_same_result(self) -> None:
        model = self.use_model("75.50|Strong React, weak backend")

        first = self.client.post(self._url(self.application.id))
        second = self.client.post(self._url(self.application.id))

        self.assertEqual(first.status_code, 201)
        self.assertEqual(second.status_code, 200)
        self.assertEqual(second.json()["data"], first.json()["data"])
        self.assertEqual(model.call_count, 1)

    def test_get_returns_stored_result(self) -> None:
        AnalysisResult.objects.create(
            application=self.application,
            compatibility_score=Decimal("12.34"),
            compatibility_reason="Stored",
        )

        response = self.client.get(self._url(self.application.id))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["compatibility_score"], 12.34)

    def test_get_without_result_is_404(self) -> None:
        response = self.client.get(self._url(self.application.id))

        self.assertEqual(response.status_code, 404)
        self.assertIn("error", response.json())

    def test_post_unknown_application_is_404(self) -> None:
        self.use_model()

        response = self.client.post(self._url(987654))

        self.assertEqual(response.status_code, 404)

    def test_contract_violation_is_502_with_raw_response(self) -> None:
        self.use_model("150|too high")

        response = self.client.post(self._url(self.application.id))

        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json()["raw_response"], "150|too high")
        self.assertFalse(AnalysisResult.objects.exists())

    def test_provider_failure_is_502(self) -> None:
        self.use_model(ConnectionError("down"))

        response = self.client.post(self._url(self.application.id))

        self.assertEqual(response.status_code, 502)
        self.assertNotIn("raw_response", response.json())

    def test_applicant_can_read_own_analysis(self) -> None:
        AnalysisResult.objects.create(
            application=self.application,
            compatibility_score=Decimal("40.00"),
            compatibility_reason="Partial fit",
        )
        applicant = APIClient()
        applicant.force_authenticate(user=self.alice)

        response = applicant.get(self._url(self.application.id))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["compatibility_reason"], "Partial fit")

    def test_unrelated_user_cannot_read_analysis(self) -> None:
        AnalysisResult.objects.create(
            application=self.application,
            compatibility_score=Decimal("12.00"),
            compatibility_reason="private",
        )
        outsider = APIClient()
        outsider.force_authenticate(user=self.bob)

        response = outsider.get(self._url(self.application.id))

        self.assertEqual(response.status_code, 404)
        self.assertNotIn("data", response.json())

    def test_unrelated_user_cannot_trigger_analysis(self) -> None:
        model = self.use_model("75|Good")
        outsider = APIClient()
        outsider.force_authenticate(user=self.bob)

        response = outsider.post(self._url(self.application.id))

        self.assertEqual(response.status_code, 404)
        self.assertEqual(model.call_count, 0)
        self.assertFalse(AnalysisResult.objects.exists())

    def test_requires_authentication(self) -> None:
        response = APIClient().get(self._url(self.application.id))

        self.assertIn(response.status_code, (401, 403))


class TeamRoleAssignmentViewTests(AnalysisViewTestCase):

    def _url(self, project_id):
        return reverse("team_role_assignment", kwargs={"project_id": project_id})

    def _complete_roster(self):
        self.application.change_status(Application.Status.APPROVED)
        create_application(self.bob, self.project, status=Application.Status.APPROVED)

    def test_incomplete_roster_is_400_with_counts(self) -> None:
        self.application.change_status(Application.Status.APPROVED)

        response = self.client.post(self._url(self.project.id))

        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual((body["required"], body["actual"]), (2, 1))

    def test_complete_roster_returns_raw_assignment(self) -> None:
        self._complete_roster()
        raw = "Alice - Frontend Developer\nBob - QA"
        self.use_model(raw)

        response = self.client.post(self._url(self.project.id))

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["data"], raw)
        self.assertNotIn("roles", response.json())

    def test_parsed_flag_adds_structured_roles(self) -> None:
        self._complete_roster()
        self.use_model("Alice - Frontend Developer\nBob - QA")

        response = self.client.post(f"{self._url(self.project.id)}?parsed=true")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(
            response.json()["roles"],
            [
                {"name": "Alice", "role": "Frontend Developer"},
                {"name": "Bob", "role": "QA"},
            ],
        )

    def test_parsed_flag_rejects_unknown_roles(self) -> None:
        self._complete_roster()
        self.use_model("Alice - Wizard\nBob - QA")

        response = self.client.post(f"{self._url(self.project.id)}?parsed=true")

        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json()["raw_response"], "Alice - Wizard\nBob - QA")

    def test_unknown_project_is_404(self) -> None:
        response = self.client.post(self._url(555555))

        self.assertEqual(response.status_code, 404)

    def test_non_creator_cannot_assign_roles(self) -> None:
        self._complete_roster()
        model = self.use_model("Alice - Frontend Developer\nBob - QA")
        member = APIClient()
        member.force_authenticate(user=self.alice)

        response = member.post(self._url(self.project.id))

        self.assertEqual(response.status_code, 403)
        self.assertEqual(model.call_count, 0)

    def test_admin_can_assign_roles(self) -> None:
        self._complete_roster()
        self.use_model("Alice - Designer\nBob - QA")
        admin = create_user("root")
        admin.role = User.ADMIN
        admin.save(update_fields=["role"])
        admin_client = APIClient()
        admin_client.force_authenticate(user=admin)

        response = admin_client.post(self._url(self.project.id))

        self.assertEqual(response.status_code, 201)
