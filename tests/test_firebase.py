import json
import unittest
from unittest.mock import MagicMock, patch

from config import firebase
from config.settings import settings
from model.credential import ServiceAccount
from util.errors import CredentialError

ACCOUNT = {
    "type": "service_account",
    "project_id": "locker-demo",
    "client_email": "relay@locker-demo.iam.gserviceaccount.com",
}


class FirebaseClientTests(unittest.TestCase):
    def setUp(self):
        firebase._app = None
        self.addCleanup(setattr, firebase, "_app", None)

    def test_database_url_for(self):
        self.assertEqual(
            firebase.database_url_for("locker-demo"),
            "https://locker-demo.firebaseio.com",
        )

    @patch("config.firebase.credentials.Certificate")
    @patch("config.firebase.firebase_admin.initialize_app")
    def test_init_uses_certificate_and_derived_url(self, mock_init, mock_cert):
        app = MagicMock()
        mock_init.return_value = app

        result = firebase.init_firebase(ServiceAccount.model_validate(ACCOUNT))

        self.assertIs(result, app)
        mock_cert.assert_called_once_with(ACCOUNT)
        mock_init.assert_called_once_with(
            mock_cert.return_value,
            {"databaseURL": "https://locker-demo.firebaseio.com"},
        )

    @patch("config.firebase.credentials.Certificate")
    @patch("config.firebase.firebase_admin.initialize_app")
    def test_init_is_idempotent(self, mock_init, mock_cert):
        account = ServiceAccount.model_validate(ACCOUNT)
        first = firebase.init_firebase(account)
        second = firebase.init_firebase(account)
        self.assertIs(first, second)
        self.assertEqual(mock_init.call_count, 1)

    @patch("config.firebase.init_firebase")
    def test_bootstrap_reads_settings(self, mock_init):
        with patch.object(
            settings, "GOOGLE_APPLICATION_CREDENTIALS_JSON", json.dumps(ACCOUNT)
        ):
            firebase.bootstrap()
        account = mock_init.call_args.args[0]
        self.assertEqual(account.project_id, "locker-demo")

    @patch("config.firebase.firebase_admin.initialize_app")
    def test_bootstrap_without_credentials_fails(self, mock_init):
        with patch.object(
            settings, "GOOGLE_APPLICATION_CREDENTIALS_JSON", None
        ), patch.object(settings, "FIREBASE_SERVICE_ACCOUNT_KEY_PATH", None):
            with self.assertRaises(CredentialError):
                firebase.bootstrap()
        mock_init.assert_not_called()

    def test_reference_requires_init(self):
        with self.assertRaises(RuntimeError):
            firebase.reference("lockers/LOCKER001/notifications")

    @patch("config.firebase.db.reference")
    def test_reference_binds_app(self, mock_reference):
        app = MagicMock()
        firebase._app = app
        firebase.reference("lockers/LOCKER001/notifications")
        mock_reference.assert_called_once_with(
            "lockers/LOCKER001/notifications", app=app
        )

    @patch("config.firebase.firebase_admin.delete_app")
    def test_close_deletes_app(self, mock_delete):
        app = MagicMock()
        firebase._app = app
        firebase.close_firebase()
        mock_delete.assert_called_once_with(app)
        self.assertIsNone(firebase._app)


if __name__ == "__main__":
    unittest.main()
