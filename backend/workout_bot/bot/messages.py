# Static reply texts

HELP = (
    "🏋️ Workout Tracker Bot\n\n"
    "Commands:\n"
    "/signup username password\n"
    "/login username password\n"
    "/exercises\n"
    "/createworkout title\n"
    "/addexercise workout_id exercise_id sets reps weight\n"
    "/myworkouts\n"
    "/stats\n"
    "/logout"
)

UNKNOWN_COMMAND = "Unknown command. Send /start to see commands."
INTERNAL_ERROR = "Sorry, something went wrong. Please try again later."

SIGNUP_OK = "✅ Registered. Token: {token}\n(You can store token client-side if needed)"
SIGNUP_FAILED = "Error creating user (maybe exists)"
SIGNUP_HASH_FAILED = "Error creating user: could not hash password"

LOGIN_OK = "✅ Logged in. Token:\n{token}\n(Keep it private)"
USER_NOT_FOUND = "User not found"
WRONG_PASSWORD = "Wrong password"

EXERCISES_HEADER = "💪 Exercises:\n"
EXERCISE_LINE = "{id}) {name} — {description} ({category})\n"
NO_EXERCISES = "No exercises found"

WORKOUT_CREATED = "Workout '{title}' created (id={id})"
WORKOUT_CREATE_FAILED = "Error creating workout"

EXERCISE_ADDED = "Exercise added ✅"
EXERCISE_ADD_FAILED = "Error adding exercise to workout"

NO_WORKOUTS = "No workouts yet"
WORKOUT_HEADER = "🏷 {id}: {title}\n"
WORKOUT_ENTRY = "   - {name}: {sets} sets x {reps} reps, weight {weight:.2f}\n"
MISSING_EXERCISE = "exercise #{id} (missing)"

STATS = "📊 Stats:\nTotal workouts: {workouts}\nTotal workout-exercises: {entries}\n"

LOGOUT = "🛑 Logout: simply discard your token client-side. (Bot does not store sessions)"
