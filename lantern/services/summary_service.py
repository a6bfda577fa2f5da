"""Parent summary and counselor notes.

Both documents are built deterministically from the profile, the final
matches and the top career's augmentation, so they are available whether or
not AI augmentation succeeded.
"""

from typing import List

from lantern.schemas.career_schemas import MatchResult
from lantern.schemas.profile_schemas import StudentProfile
from lantern.schemas.recommendation_schemas import AIAugmentation, CounselorNotes, ParentSummary
from lantern.utils.constants import CareerReadiness, Constraint, ScoringConstants, Subject
from lantern.utils.validators import is_low_information_text

_FLAG_INSIGHTS = {
    "education_exceeds_willingness": (
        "The named career or some matches need more education than the student "
        "currently plans; discuss education options and financial aid"
    ),
    "low_subject_alignment": (
        "Subject ratings are weak in the areas the top career relies on; "
        "explore whether interest or preparation is the gap"
    ),
    "conflicting_location_constraints": (
        "Student wants to stay close to home but is also open to relocating; "
        "clarify location priorities"
    ),
}

_CONSTRAINT_LABELS = {
    Constraint.STAY_CLOSE_HOME: "stay close to home",
    Constraint.OPEN_RELOCATING: "open to relocating",
    Constraint.FLEXIBLE_HOURS: "needs flexible hours",
}


def career_readiness(profile: StudentProfile, matches: List[MatchResult]) -> CareerReadiness:
    """High for a decided student with a strong top match, developing for an
    undecided student with no clear category, moderate otherwise."""
    if profile.is_decided and matches and matches[0].match_score >= ScoringConstants.DECIDED_THRESHOLD:
        return CareerReadiness.HIGH
    if not profile.is_decided and profile.selected_category is None:
        return CareerReadiness.DEVELOPING
    return CareerReadiness.MODERATE


def _subject_label(subject: Subject) -> str:
    return subject.value.replace("_", " ")


def _flag_insight(flag: str) -> str:
    if flag in _FLAG_INSIGHTS:
        return _FLAG_INSIGHTS[flag]
    if flag.startswith("minimal_free_text:"):
        field_name = flag.split(":", 1)[1]
        return f"Very little detail in the {field_name} answer; follow up in conversation"
    return flag


class SummaryService:
    """Builds the parent- and counselor-facing documents."""

    def build_parent_summary(
        self,
        profile: StudentProfile,
        matches: List[MatchResult],
        augmentation: AIAugmentation
    ) -> ParentSummary:
        top = matches[0]
        strengths = [_subject_label(s) for s in profile.high_interest_subjects()[:3]]
        strength_text = ", ".join(strengths) if strengths else "a range of subjects"

        overview = (
            f"Based on the assessment, your child shows strong potential for {top.title} "
            f"and related careers. They show the most interest in {strength_text}."
        )

        key_recommendations = [
            f"Explore {match.title} ({match.match_score:g}% match), which needs "
            f"{match.required_education.display_name}"
            for match in matches
        ]

        courses = [
            course.course_name
            for course in augmentation.academic_plan.current_year + augmentation.academic_plan.next_year
        ][:3]
        support_actions = []
        if courses:
            support_actions.append(f"Encourage enrollment in {', '.join(courses)}")
        support_actions.extend([
            "Help research local training programs and colleges",
            "Support extracurricular activities related to career interests",
            "Encourage part-time work or volunteering in the field",
            "Assist with scholarship and financial aid applications",
        ])

        salary = top.average_salary
        if top.local_opportunities is not None:
            salary = top.local_opportunities.average_local_salary
        next_grade = min(profile.grade + 1, 12)
        timeline = [f"Grade {profile.grade}: Focus on core academics and career exploration"]
        if next_grade > profile.grade:
            timeline.append(f"Grade {next_grade}: Take career-specific courses and gain experience")
        timeline.extend([
            f"After graduation: Pursue {top.required_education.display_name} education or training",
            f"Career entry: Target {top.title} positions averaging ${salary:,.0f} a year",
        ])

        return ParentSummary(
            overview=overview,
            key_recommendations=key_recommendations,
            support_actions=support_actions,
            timeline_highlights=timeline,
        )

    def build_counselor_notes(
        self,
        profile: StudentProfile,
        matches: List[MatchResult],
        flags: List[str]
    ) -> CounselorNotes:
        top = matches[0]
        readiness = career_readiness(profile, matches)

        insights = [
            f"Student is in grade {profile.grade} and shows {readiness.value} career readiness",
            f"Assessment path: {profile.career_clarity.value}",
            f"Primary interests align with the {top.sector.display_name} sector",
            f"Education commitment level: {profile.education_willingness.display_name}",
        ]
        if profile.selected_category is not None:
            insights.append(f"Career category: {profile.selected_category.display_name}")
        if profile.constraints:
            labels = sorted(_CONSTRAINT_LABELS[c] for c in profile.constraints)
            insights.append(f"Constraints: {', '.join(labels)}")
        if profile.support_confidence and not is_low_information_text(profile.support_confidence):
            insights.append(f"On support: {profile.support_confidence}")
        insights.extend(_flag_insight(flag) for flag in flags)

        rationale = [f"{top.title} ({top.match_score:g}%): {factor}" for factor in top.reasoning_factors]
        if top.local_opportunities is not None:
            rationale.append(
                f"Local job market shows {top.local_opportunities.estimated_jobs} listings within "
                f"{top.local_opportunities.distance_from_student} miles"
            )

        follow_up = [
            "Schedule follow-up meeting in 3 months to review progress",
            "Connect student with professionals in recommended field",
            "Monitor academic performance in recommended courses",
            "Assist with scholarship and program applications",
        ]
        if readiness == CareerReadiness.DEVELOPING:
            follow_up.insert(0, "Arrange career exploration activities to narrow down interests")

        meeting_topics = [
            "Review career recommendations and rationale",
            "Discuss academic plan and course selections",
            "Explore post-secondary education options and costs",
            "Plan for career exploration activities and experiences",
        ]

        return CounselorNotes(
            career_readiness=readiness,
            assessment_insights=insights,
            recommendation_rationale=rationale,
            follow_up_actions=follow_up,
            parent_meeting_topics=meeting_topics,
        )


__all__ = ["SummaryService", "career_readiness"]
