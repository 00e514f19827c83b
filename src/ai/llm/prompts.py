"""
Prompt Templates for Worlds Data and Chat

Fixed instructions sent to the completion API.
"""

FIRST_SEASON_YEAR = 2011


WORLDS_DATA_PROMPT = f"""Generate a League of Legends World Championship encyclopedia as JSON in the WorldsResponse format:
{{
"lastUpdated": string, // ISO timestamp
"seasons": WorldsSeason[]
}}
Cover every edition from {FIRST_SEASON_YEAR} (Season 1 World Championship) through the most recent one. Every year must have these fields: year (number), championTeam, runnerUpTeam, location (city of the final), score, keyPlayers (1 to 3 representative players, each with name, role, team, imageUrl, bio), highlightVideos (at least 1 classic match, each with title, url).
Output strictly pure JSON matching the WorldsResponse structure, with no explanation or Markdown before or after it. Use web_search to find image links that can be used directly, preferring Leaguepedia/LoL Fandom, Riot official sources or Wikimedia. highlightVideos should favour official or licensed VODs on YouTube."""


CHAT_SYSTEM = """You are a coach who specialises in explaining the history, tactics, patches and player stories of the League of Legends World Championship."""


CHAT_USER_TEMPLATE = """Question: {question}
If useful, refer to this Worlds summary:
{context}"""


CONTEXT_LINE_TEMPLATE = "{year} champion: {champion}, runner-up: {runner_up}"


NO_CACHE_CONTEXT = "No cached Worlds data is available yet."


NO_ANSWER_FALLBACK = "No answer is available right now. Please try again later."
