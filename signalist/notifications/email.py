import os
import smtplib
from email.mime.text import MIMEText
from signalist.logging import log_event
from signalist.config import EMAIL_USER, EMAIL_PASS, SMTP_HOST, SMTP_PORT
from signalist.notifications.email_template import prepare_news_summary_email_body, prepare_welcome_email_body

SENDER_NAME = "Signalist"
WELCOME_SUBJECT = "Welcome to Signalist - your stock market toolkit is ready!"

def send_email(to_email, subject, body):
    """
    Sends an HTML email to the specified recipient.
    Logs the process and returns whether the email was handed to the SMTP server.
    """
    log_event("INFO", "Preparing to send email", to=to_email, subject=subject, github_sha=os.getenv("GITHUB_SHA"))
    msg = MIMEText(body, "html")
    msg['Subject'] = subject
    msg['From'] = f"{SENDER_NAME} <{EMAIL_USER}>"
    msg['To'] = to_email
    try:
        with smtplib.SMTP(SMTP_HOST, SMTP_PORT) as server:
            server.starttls()
            server.login(EMAIL_USER, EMAIL_PASS)
            server.sendmail(EMAIL_USER, [to_email], msg.as_string())
            log_event("INFO", "Email sent", to=to_email, subject=subject)
            return True
    except Exception as e:
        log_event("ERROR", f"Failed to send email to {to_email}", error=str(e))
        return False

def send_welcome_email(email, name, intro):
    body = prepare_welcome_email_body(name, intro)
    return send_email(email, WELCOME_SUBJECT, body)

def send_news_summary_email(email, date, news_content):
    subject = f"Market News Summary Today - {date}"
    body = prepare_news_summary_email_body(date, news_content)
    return send_email(email, subject, body)
