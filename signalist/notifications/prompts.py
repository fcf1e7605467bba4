PERSONALIZED_WELCOME_EMAIL_PROMPT = """Generate highly personalized HTML content that will be inserted into an email template at the {{intro}} placeholder.

User profile data:
{{userProfile}}

PERSONALIZATION REQUIREMENTS:
You MUST create content that is obviously tailored to THIS specific user by:
- Directly referencing their investment goals and how Signalist helps reach them
- Mentioning their preferred industry by name
- Matching the tone to their risk tolerance (steady and reassuring for low, energetic for high)
- Keeping it relevant to investors in their country

CRITICAL FORMATTING REQUIREMENTS:
- Return ONLY clean HTML content with NO markdown, NO code blocks, NO backticks
- Use a SINGLE paragraph only: <p class="mobile-text" style="margin: 0 0 30px 0; font-size: 16px; line-height: 1.6; color: #CCDADC;">content</p>
- Write exactly TWO sentences, about 35-50 words in total
- Use <strong> to highlight key personalized elements (their goals, sectors)
- Do NOT start with "Welcome", the email header already says welcome
- Do NOT repeat the user's name, the greeting already includes it

Example personalized output:
<p class="mobile-text" style="margin: 0 0 30px 0; font-size: 16px; line-height: 1.6; color: #CCDADC;">Thanks for joining Signalist! As someone focused on <strong>technology growth stocks</strong>, you'll love our real-time alerts for companies like the ones you're tracking. We'll help you spot opportunities before they become mainstream news.</p>"""

NEWS_SUMMARY_EMAIL_PROMPT = """Generate HTML content for a market news summary email that will be inserted into the NEWS_SUMMARY_EMAIL_TEMPLATE at the {{newsContent}} placeholder.

News data to summarize:
{{newsData}}

CRITICAL FORMATTING REQUIREMENTS:
- Return ONLY clean HTML content with NO markdown, NO code blocks, NO backticks
- Structure the content with section headings using:
  <h3 class="mobile-news-title dark-text" style="margin: 30px 0 15px 0; font-size: 18px; font-weight: 600; color: #f8f9fa; line-height: 1.2;">Section Title</h3>
- Present each article as a short block:
  <div class="dark-info-box" style="background-color: #212328; padding: 24px; margin: 20px 0; border-radius: 8px;">
  with the headline, two or three plain-English bullet points explaining what happened and why it matters to an everyday investor,
  and a "Read Full Story" link to the article url
- Use plain language, avoid jargon, explain what numbers mean
- Group articles under "Market Highlights" for general news or "Your Watchlist" for company news
- Keep the whole summary concise: at most 6 articles"""
