from .ats_scoring import job_description_keywords, score_ats, score_keyword_overlap, suggest_jobs
from .candidate_info import extract_candidate_info
from .experience_critic import critique_work_experience
from .keyword_extractor import extract_important_keywords
from .readability import analyze_readability, count_words
from .sections import segment_sections
from .skill_matcher import match_skills
from .tokenizer import tokenize

__all__ = [
    "tokenize",
    "match_skills",
    "extract_important_keywords",
    "segment_sections",
    "extract_candidate_info",
    "critique_work_experience",
    "analyze_readability",
    "count_words",
    "score_ats",
    "score_keyword_overlap",
    "job_description_keywords",
    "suggest_jobs",
]
