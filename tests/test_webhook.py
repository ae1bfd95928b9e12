from urllib.parse import urlencode


def initialized_notification(client, intent_payload, status: str = "success") -> dict:
    data = client.post("/api/payment/initialize", json=intent_payload).json()["paymentData"]
    return {
        "mihpayid": "403993715531077182",
        "mode": "CC",
        "status": status,
        "key": data["key"],
        "txnid": data["txnid"],
        "amount": data["amount"],
        "productinfo": data["productinfo"],
        "firstname": data["firstname"],
        "email": data["email"],
        "phone": data["phone"],
        "hash": data["hash"],
    }


def test_form_encoded_webhook_is_verified(client, intent_payload):
    notification = initialized_notification(client, intent_payload)
    response = client.post(
        "/api/payment/webhook",
        content=urlencode(notification),
        headers={"content-type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["isValid"] is True
    assert body["status"] == "success"
    assert body["transactionId"] == notification["txnid"]
    assert body["message"] == "Webhook processed successfully"


def test_json_webhook_is_verified(client, intent_payload):
    notification = initialized_notification(client, intent_payload, status="failure")
    response = client.post("/api/payment/webhook", json=notification)
    assert response.status_code == 200
    assert response.json()["isValid"] is True
    assert response.json()["status"] == "failure"


def test_forged_webhook_is_reported_invalid(client, intent_payload):
    notification = initialized_notification(client, intent_payload)
    notification["amount"] = "1"
    response = client.post("/api/payment/webhook", json=notification)
    assert response.status_code == 200
    assert response.json()["isValid"] is False


def test_webhook_without_hash_is_400(client, intent_payload):
    notification = initialized_notification(client, intent_payload)
    notification.pop("hash")
    response = client.post("/api/payment/webhook", json=notification)
    assert response.status_code == 400
    assert response.json()["errorCode"] == "MissingVerificationFields"


def test_webhook_with_unreadable_body_is_400(client):
    response = client.post(
        "/api/payment/webhook",
        content=b"\x00{broken",
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["errorCode"] == "InvalidRequestBody"


def test_empty_webhook_is_400(client):
    response = client.post("/api/payment/webhook")
    assert response.status_code == 400
    assert response.json()["errorCode"] == "MissingVerificationFields"


def test_form_webhook_content_type_is_case_insensitive(client, intent_payload):
    notification = initialized_notification(client, intent_payload)
    response = client.post(
        "/api/payment/webhook",
        content=urlencode(notification),
        headers={"content-type": "Application/X-WWW-Form-Urlencoded; charset=UTF-8"},
    )
    assert response.status_code == 200
    assert response.json()["isValid"] is True


def test_multipart_webhook_is_verified(client, intent_payload):
    notification = initialized_notification(client, intent_payload)
    response = client.post(
        "/api/payment/webhook",
        data=notification,
        files={"udf1": ("udf1.txt", b"", "text/plain")},
    )
    assert response.status_code == 200
    assert response.json()["isValid"] is True
