# frontend/app/api_client.py
# The dedicated API client ("service layer") for the Google Apps Script endpoint.
# Every function takes the endpoint base URL explicitly so tests can point it anywhere;
# handlers.py passes config.APPS_SCRIPT_BASE.

import datetime
import json
import logging
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import requests
from pydantic import ValidationError

from .config import config
from .errors import FetchError, SendError
from .schemas import DEPT_ALL_VALUE, DrinkOrderForm, RecipientList

logger = logging.getLogger(__name__)

FN_GET_RECIPIENTS = "getRecipients"
FN_SENDMAIL = "sendmail"

# Apps Script reads the raw body; a text/plain body is what a browser sends for a string payload.
TEXT_JSON_HEADERS = {"Content-Type": "text/plain;charset=utf-8"}

SEND_SUCCESS_MESSAGE = "寄送成功"


def build_get_recipients_url(base: str, dept: str | None = None, keyword: str | None = None) -> str:
    """
    Builds the list URL. `dept` is dropped when empty or equal to DEPT_ALL_VALUE,
    `keyword` when empty; query parameters already present on `base` are kept.
    """
    parts = urlsplit(base)
    query = [
        (k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True)
        if k not in ("fn", "dept", "keyword")
    ]
    query.append(("fn", FN_GET_RECIPIENTS))
    if dept and dept != DEPT_ALL_VALUE:
        query.append(("dept", dept))
    if keyword:
        query.append(("keyword", keyword))
    return urlunsplit(parts._replace(query=urlencode(query)))


def get_recipients(base: str, dept: str | None = None, keyword: str | None = None) -> RecipientList:
    """Fetches the recipient list and the known departments. Raises FetchError on any failure."""
    url = build_get_recipients_url(base, dept, keyword)
    try:
        response = requests.get(url)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"Recipient list request failed: {e}")
        raise FetchError(f"讀取名單失敗：{e}") from e

    try:
        data = response.json()
    except ValueError as e:
        logger.warning(f"Recipient list response is not JSON: {e}")
        raise FetchError("讀取名單失敗：回應格式錯誤") from e

    if not isinstance(data, dict):
        raise FetchError("讀取名單失敗：回應格式錯誤")
    try:
        result = RecipientList.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Recipient list has malformed entries: {e}")
        raise FetchError("讀取名單失敗：名單資料格式錯誤") from e

    logger.info(f"Fetched {len(result.recipients)} recipients (dept={dept!r}, keyword={keyword!r}).")
    return result


def to_iso_utc(value: datetime.datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a 'Z' suffix. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    utc = value.astimezone(datetime.timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S") + f".{utc.microsecond // 1000:03d}Z"


def build_send_payload(form: DrinkOrderForm, selected: dict[str, bool], bcc_mode: bool) -> dict:
    """
    Assembles the `sendmail` payload. `form.link` is expected to be sanitized already.
    `emails` keeps the selection mapping's order and contains only checked entries.
    """
    return {
        "vendor": form.vendor,
        "link": form.link,
        "deadline": to_iso_utc(form.deadline),
        "note": form.note or "",
        "emails": [email for email, checked in selected.items() if checked],
        "bccMode": bool(bcc_mode),
    }


def post_sendmail(base: str, payload: dict) -> str:
    """
    Posts `{fn: "sendmail", payload}` and interprets the reply.
    Returns the success message; raises SendError otherwise.
    """
    body = json.dumps({"fn": FN_SENDMAIL, "payload": payload}, ensure_ascii=False)
    try:
        response = requests.post(base, data=body.encode("utf-8"), headers=TEXT_JSON_HEADERS)
    except requests.RequestException as e:
        logger.error(f"sendmail request failed: {e}")
        raise SendError(f"寄送失敗：{e}") from e

    try:
        data = response.json()
    except ValueError as e:
        logger.error(f"sendmail response is not JSON (status {response.status_code}).")
        raise SendError() from e

    if isinstance(data, dict) and data.get("ok"):
        message = data.get("message") or SEND_SUCCESS_MESSAGE
        logger.info(f"sendmail succeeded for {len(payload.get('emails', []))} recipients: {message}")
        return message

    message = data.get("message") if isinstance(data, dict) else None
    logger.warning(f"sendmail rejected by backend: {message}")
    raise SendError(message or None)


# --- Legacy sign-up form ---

def lookup_public_ip() -> str:
    """Asks ipify, then httpbin, for this machine's public IP. Returns 'unknown' if both fail."""
    try:
        response = requests.get(config.IPIFY_URL)
        response.raise_for_status()
        return response.json()["ip"]
    except (requests.RequestException, ValueError, KeyError) as e:
        logger.error(f"Error fetching IP from ipify: {e}")

    try:
        response = requests.get(config.HTTPBIN_IP_URL)
        response.raise_for_status()
        return response.json()["origin"]
    except (requests.RequestException, ValueError, KeyError) as e:
        logger.error(f"Error fetching IP from httpbin: {e}")

    return "unknown"


def post_signup(base: str, email: str) -> dict:
    """Posts `{email, ip}` for the legacy sign-up form. Returns the payload that was sent."""
    payload = {"email": email, "ip": lookup_public_ip()}
    response = requests.post(base, json=payload)
    response.raise_for_status()
    logger.info(f"Sign-up posted for {email} from {payload['ip']}.")
    return payload
