from __future__ import annotations

from skillpath.schemas.jobs import Job

JOBS: tuple[Job, ...] = (
    Job(
        id="1",
        title="Frontend Developer",
        company="TechStart India",
        location="Bangalore, Karnataka",
        salary_range="₹4 - ₹6 LPA",
        experience="0-1 years",
        competition="Medium",
        skills=("HTML", "CSS", "JavaScript", "React"),
        posted_days=2,
    ),
    Job(
        id="2",
        title="Junior Data Analyst",
        company="DataDriven Solutions",
        location="Mumbai, Maharashtra",
        salary_range="₹3 - ₹5 LPA",
        experience="0-2 years",
        competition="High",
        skills=("Excel", "SQL", "Python", "Data Analysis"),
        posted_days=1,
    ),
    Job(
        id="3",
        title="Digital Marketing Executive",
        company="GrowthBox",
        location="Delhi NCR",
        salary_range="₹2.5 - ₹4 LPA",
        experience="0-1 years",
        competition="Low",
        skills=("Digital Marketing", "Content Writing", "Social Media"),
        posted_days=3,
    ),
    Job(
        id="4",
        title="Python Developer",
        company="CodeCraft Labs",
        location="Hyderabad, Telangana",
        salary_range="₹4 - ₹7 LPA",
        experience="0-2 years",
        competition="Medium",
        skills=("Python", "Django", "SQL", "REST APIs"),
        posted_days=5,
    ),
    Job(
        id="5",
        title="UI/UX Designer",
        company="DesignFirst Studio",
        location="Pune, Maharashtra",
        salary_range="₹3 - ₹5 LPA",
        experience="0-1 years",
        competition="Medium",
        skills=("UI/UX Design", "Figma", "Graphic Design"),
        posted_days=4,
    ),
    Job(
        id="6",
        title="Content Writer",
        company="WordWise Media",
        location="Remote",
        salary_range="₹2 - ₹3.5 LPA",
        experience="0-1 years",
        competition="Low",
        skills=("Content Writing", "SEO", "Communication"),
        posted_days=1,
    ),
    Job(
        id="7",
        title="Java Developer Trainee",
        company="Enterprise Solutions Ltd",
        location="Chennai, Tamil Nadu",
        salary_range="₹3.5 - ₹5 LPA",
        experience="Fresher",
        competition="High",
        skills=("Java", "SQL", "Spring Boot"),
        posted_days=6,
    ),
    Job(
        id="8",
        title="Video Editor",
        company="Creative Studios",
        location="Mumbai, Maharashtra",
        salary_range="₹2.5 - ₹4.5 LPA",
        experience="0-1 years",
        competition="Low",
        skills=("Video Editing", "After Effects", "Premiere Pro"),
        posted_days=2,
    ),
)


def _matches_query(job: Job, needle: str) -> bool:
    return (
        needle in job.title.lower()
        or needle in job.company.lower()
        or any(needle in skill.lower() for skill in job.skills)
    )


def filter_jobs(query: str | None = None, competition: str = "all") -> list[Job]:
    """Substring search over title, company and skills, then an exact competition filter."""
    jobs = list(JOBS)
    needle = (query or "").lower()
    if needle:
        jobs = [job for job in jobs if _matches_query(job, needle)]
    if competition != "all":
        jobs = [job for job in jobs if job.competition == competition]
    return jobs
