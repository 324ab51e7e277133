class InternalURIs:
    API = "/api"
    HEALTHZ = "/healthz"
    LOGIN = API + "/login"
    CLEAR_NOTIFICATIONS = "/clear-notifications"


class ExternalURIs:
    FIREBASE_DATABASE = "https://{project_id}.firebaseio.com"


class EnvVars:
    CREDENTIALS_JSON = "GOOGLE_APPLICATION_CREDENTIALS_JSON"
    SERVICE_ACCOUNT_KEY_PATH = "FIREBASE_SERVICE_ACCOUNT_KEY_PATH"
