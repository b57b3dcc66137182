CLASSIFY_HEADLINES_INSTRUCTIONS = """You are assessing whether the United States initiated or significantly escalated armed conflict today.

"Armed conflict" includes: airstrikes, military invasions, significant troop deployments into active conflict zones, or weapons transfers that directly enable active combat operations.

It does NOT include: ongoing existing operations with no new escalation, sanctions, diplomatic threats, military posturing without action, or routine military activities.

Here are today's top news headlines:

{headlines}

Respond ONLY with valid JSON in this exact format, with no additional text before or after:
{{
  "status": "no" | "unclear" | "yes",
  "tagline": "One wry sentence, max 12 words.",
  "headlines": [
    {{ "title": "...", "url": "...", "source": "..." }},
    {{ "title": "...", "url": "...", "source": "..." }}
  ]
}}

Choose 2-3 of the most relevant headlines from the provided list for the headlines array. If status is "no", pick the most relevant peaceful/routine headlines. The tagline should be darkly wry and specific to today's situation."""
