from html import escape

def prepare_welcome_email_body(name, intro):
    """
    `intro` is HTML produced by the welcome prompt and is inserted as is.
    """
    return f"""<html>
  <body style="margin: 0; padding: 0; background-color: #050505; font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;">
    <div style="max-width: 600px; margin: 0 auto; padding: 40px; background-color: #141414; color: #CCDADC;">
      <h1 style="margin: 0 0 30px 0; font-size: 24px; font-weight: 600; color: #FDD458;">Welcome aboard {escape(name or '')}</h1>
      {intro}
      <p style="margin: 0 0 15px 0; font-size: 16px; line-height: 1.6;">Here's what you can do right now:</p>
      <ul style="margin: 0 0 30px 0; padding-left: 20px; font-size: 16px; line-height: 1.6;">
        <li>Set up your watchlist to follow your favorite stocks</li>
        <li>Search any company and add it in one click</li>
        <li>Get a daily summary of the news that moves your stocks</li>
      </ul>
      <p style="margin: 0 0 30px 0; font-size: 16px; line-height: 1.6;">We'll keep you informed with timely updates, insights, and alerts so you never miss an opportunity.</p>
      <p style="margin: 0; font-size: 14px; color: #9095A1;">Signalist HQ</p>
    </div>
  </body>
</html>
"""

def prepare_news_summary_email_body(date, news_content):
    """
    `news_content` is HTML produced by the news summary prompt and is inserted as is.
    """
    return f"""<html>
  <body style="margin: 0; padding: 0; background-color: #050505; font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;">
    <div style="max-width: 600px; margin: 0 auto; padding: 40px; background-color: #141414; color: #CCDADC;">
      <h1 style="margin: 0 0 8px 0; font-size: 24px; font-weight: 600; color: #FDD458;">Market News Summary Today</h1>
      <p style="margin: 0 0 30px 0; font-size: 14px; color: #6b7280;">{escape(date)}</p>
      {news_content}
      <p style="margin: 40px 0 0 0; font-size: 14px; color: #9095A1;">You're receiving this because you subscribed to Signalist news updates.</p>
    </div>
  </body>
</html>
"""
