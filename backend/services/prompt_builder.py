"""Prompt template for the WhatsApp outreach message.

The builder is pure: the same customer name, text and resolved config always
produce the same prompt. Instruction variants live in fixed lookup tables.
"""

from types import MappingProxyType

from models.schemas.generation_config import PromptConfig

DEFAULT_SHOP_NAME = "Fintech BMS"

DISCLAIMER = "📝 Note: This is general guidance based on your resume. Results may vary. Best wishes! 🙏"

LANGUAGE_INSTRUCTIONS = MappingProxyType({
    "english": "Write the entire message in English only.",
    "tamil": "Write the entire message in Tamil language only.",
    "both": (
        "Write the message in both English and Tamil. "
        "First provide the English version, then the Tamil version."
    ),
})

TONE_INSTRUCTIONS = MappingProxyType({
    "professional": "Use a professional, polished tone - courteous, clear and confident.",
    "friendly": "Use a friendly, casual tone - like a helpful friend chatting on WhatsApp.",
    "motivational": "Use a highly motivational, energetic tone that lifts the customer's confidence.",
    "formal": "Use a formal, traditional tone with respectful and courteous language.",
})

CUSTOMER_CONTEXT = MappingProxyType({
    "fresher": (
        "The customer is a fresher / fresh graduate looking for their first job. "
        "Focus on their education, academic projects, internships and potential."
    ),
    "experienced": (
        "The customer is an experienced professional. "
        "Focus on their achievements, leadership and next career step."
    ),
    "career_change": (
        "The customer is moving into a new field. "
        "Highlight transferable skills and practical ways to bridge the gap."
    ),
    "student": (
        "The customer is a student looking for internships or part-time roles. "
        "Focus on skills to build, learning opportunities and entry-level openings."
    ),
    "custom": "",
})

SECTION_BLOCKS = MappingProxyType({
    "appreciation": """✅ Appreciation Message:
- Thank them warmly for choosing our shop
- Address them by name""",
    "feedback": """✅ Short Resume Feedback:
- Provide 2-3 positive observations about their resume
- Mention any standout skills or experience""",
    "guidance": """✅ Career Guidance/Tips:
- Give 2-3 actionable career tips relevant to their profile
- Keep it encouraging and practical""",
    "job_roles": """✅ Job Role Suggestions:
- Suggest 3-5 job roles that match their profile
- Be specific based on their skills and experience""",
    "interview_questions": """✅ Interview Questions Section:
- Include 5-8 interview questions relevant to the candidate's skills and experience
- Questions should be practical and commonly asked in interviews for their field
- Format as a numbered list""",
    "ats": """✅ ATS Score Section:
- Provide an estimated ATS (Applicant Tracking System) compatibility score out of 100
- Briefly explain what could improve the score""",
    "encouragement": """✅ Final Encouragement:
- End with a motivating message
- Wish them success in their job search""",
})

# "ats" is not a template section; it is driven by the user's settings
SECTION_ORDER = (
    "appreciation",
    "feedback",
    "guidance",
    "job_roles",
    "interview_questions",
    "ats",
    "encouragement",
)


def _enabled_sections(config: PromptConfig) -> list[str]:
    enabled = []
    for name in SECTION_ORDER:
        if name == "ats":
            if config.include_ats_score:
                enabled.append(name)
        elif getattr(config.sections, name):
            enabled.append(name)
    return enabled


def build_message_prompt(
    customer_name: str,
    extracted_text: str,
    config: PromptConfig,
    shop_name: str = DEFAULT_SHOP_NAME,
) -> str:
    """Assemble the instruction document for one generation request."""
    language_instruction = LANGUAGE_INSTRUCTIONS[config.language]
    tone_instruction = TONE_INSTRUCTIONS.get(config.tone, TONE_INSTRUCTIONS["professional"])
    customer_context = CUSTOMER_CONTEXT.get(config.customer_type, "")

    sections = "\n\n".join(SECTION_BLOCKS[name] for name in _enabled_sections(config))

    context_section = f"\nCUSTOMER PROFILE:\n{customer_context}\n" if customer_context else ""
    additional_section = (
        f"\nADDITIONAL INSTRUCTIONS:\n{config.custom_instructions}\n"
        if config.custom_instructions
        else ""
    )

    return f"""You are a friendly shop assistant at a Xerox/Printout shop called "{shop_name}". A customer named {customer_name} has just had their resume printed.
{context_section}
Analyze the following resume and generate a WhatsApp-ready message that builds trust and provides value:

RESUME CONTENT:
---
{extracted_text}
---

TONE:
{tone_instruction}

Generate a message that includes:

{sections}
{additional_section}
IMPORTANT RULES:
1. {language_instruction}
2. Keep the message concise and WhatsApp-friendly (easy to read on mobile)
3. Use light emojis only from this set: ✅ 🔥 🙏 🙂 👍 💼 📝 (don't overuse)
4. NO fake claims like "you got selected", "interview scheduled" or guaranteed job offers
5. MUST include this disclaimer at the end, word for word: "{DISCLAIMER}"
6. Keep it professional but warm - like a helpful friend
7. Format for WhatsApp: use line breaks, no markdown headings, tables or bold/italic markup

Generate the WhatsApp message now:"""
